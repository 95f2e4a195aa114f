"""Built-in seed dataset used when no data file can be loaded"""
from datetime import timedelta

from core.models import Creator, StoreState, Video
from core.models.videos import utc_now


def default_seed() -> StoreState:
    """Fresh copy of the seed videos and creators"""
    now = utc_now()

    videos = [
        Video(
            id="vid1",
            title="JavaScript Basics in 60 sec",
            description="Learn JS variables and functions",
            creator_id="user1",
            duration=60,
            topic="Programming",
            skill_level="Beginner",
            views=234,
            thumbnail="https://via.placeholder.com/300x200?text=JS+Basics",
            video_url="https://www.youtube.com/embed/PkZNo7MFNFg",
            created_at=now - timedelta(days=1),
            likes=45,
        ),
        Video(
            id="vid2",
            title="Python List Comprehension",
            description="Master Python lists in 90 seconds",
            creator_id="user1",
            duration=90,
            topic="Programming",
            skill_level="Intermediate",
            views=567,
            thumbnail="https://via.placeholder.com/300x200?text=Python",
            video_url="https://www.youtube.com/embed/DZ4sSfXtpQU",
            created_at=now - timedelta(days=2),
            likes=123,
        ),
        Video(
            id="vid3",
            title="React Hooks Explained",
            description="Understanding React Hooks in under 2 minutes",
            creator_id="user1",
            duration=120,
            topic="Programming",
            skill_level="Advanced",
            views=890,
            thumbnail="https://via.placeholder.com/300x200?text=React",
            video_url="https://www.youtube.com/embed/TNhaISOUy6Q",
            created_at=now - timedelta(days=3),
            likes=256,
        ),
    ]

    creators = [
        Creator(
            id="user1",
            username="educator1",
            bio="Teaching technology one video at a time",
            followers=120,
            avatar="👨‍🏫",
            email="edu@example.com",
            type="creator",
        ),
    ]

    return StoreState(videos=videos, creators=creators)
