"""Flat JSON file persistence for videos and creators"""
import json
import logging
import shutil
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional, Tuple, Union

from pydantic import ValidationError

from core.models import Creator, StoreState, Video
from core.seed import default_seed

logger = logging.getLogger(__name__)


class VideoStore:
    """Owns the in-memory document and its backing file.

    The whole document is loaded once and rewritten on every mutation.
    There are no partial writes and no transactions: if a write fails the
    in-memory state stays mutated and the file keeps its previous content.
    """

    def __init__(
        self,
        path: Union[str, Path],
        seed_factory: Callable[[], StoreState] = default_seed,
    ):
        self.path = Path(path)
        self.seed_factory = seed_factory
        self.state = StoreState()
        self._lock = threading.RLock()

    @classmethod
    def open(cls, path: Union[str, Path], **kwargs) -> "VideoStore":
        store = cls(path, **kwargs)
        store.state = store.load()
        return store

    @property
    def videos(self):
        return self.state.videos

    @property
    def creators(self):
        return self.state.creators

    @property
    def backup_path(self) -> Path:
        return self.path.with_name(self.path.name + ".corrupt")

    def load(self) -> StoreState:
        """Read the data file, falling back to the seed dataset.

        Records that fail validation are skipped one by one. Whenever part of
        the file cannot be loaded, a copy is kept at ``backup_path`` before a
        later save can overwrite it.
        """
        if not self.path.exists():
            logger.info("Data file not found, using seed data", extra={
                "data_file": str(self.path)
            })
            return self.seed_factory()

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(raw, dict):
                raise ValueError(f"expected a JSON object, got {type(raw).__name__}")
            videos, skipped_videos = self._valid_records(Video, raw.get("videos"))
            creators, skipped_creators = self._valid_records(Creator, raw.get("creators"))
            state = StoreState.model_validate({**raw, "videos": videos, "creators": creators})
        except (OSError, ValueError) as e:
            logger.warning("Could not read data file, using seed data", extra={
                "data_file": str(self.path),
                "error": str(e)
            })
            self._keep_backup()
            return self.seed_factory()

        if skipped_videos or skipped_creators:
            self._keep_backup()

        logger.info("Loaded data from file", extra={
            "data_file": str(self.path),
            "videos": len(state.videos),
            "creators": len(state.creators),
            "skipped": skipped_videos + skipped_creators
        })
        return state

    def _valid_records(self, model, records) -> Tuple[list, int]:
        if records is None:
            return [], 0
        if not isinstance(records, list):
            raise ValueError(f"expected a list of {model.__name__} records, got {type(records).__name__}")

        valid = []
        for index, record in enumerate(records):
            try:
                valid.append(model.model_validate(record))
            except ValidationError as e:
                logger.warning(f"Skipping invalid {model.__name__} record", extra={
                    "data_file": str(self.path),
                    "index": index,
                    "error": str(e)
                })
        return valid, len(records) - len(valid)

    def _keep_backup(self) -> None:
        try:
            shutil.copyfile(self.path, self.backup_path)
        except OSError:
            logger.exception("Could not back up data file", extra={
                "data_file": str(self.path)
            })
            return

        logger.warning("Unreadable data kept in backup file", extra={
            "data_file": str(self.path),
            "backup_file": str(self.backup_path)
        })

    def save(self, state: Optional[StoreState] = None) -> bool:
        """Overwrite the data file with the full state.

        Returns False when the write fails; the failure is logged and not
        retried.
        """
        state = state if state is not None else self.state
        payload = json.dumps(state.model_dump(mode="json"), indent=2, ensure_ascii=False)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError:
            logger.exception("Error saving data file", extra={
                "data_file": str(self.path)
            })
            return False

        logger.debug("Data saved to file", extra={"data_file": str(self.path)})
        return True

    @contextmanager
    def mutation(self) -> Iterator[StoreState]:
        """Serialize a read-modify-write and flush it to disk on success"""
        with self._lock:
            yield self.state
            self.save()

    def find_video(self, video_id: str) -> Optional[Video]:
        return next((v for v in self.state.videos if v.id == video_id), None)

    def find_creator(self, creator_id: str) -> Optional[Creator]:
        return next((c for c in self.state.creators if c.id == creator_id), None)
