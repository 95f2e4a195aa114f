from pydantic import BaseModel, ConfigDict, model_validator


class RecordModel(BaseModel):
    """Persisted record; unknown fields are kept and ``null`` means default"""
    model_config = ConfigDict(extra="allow")

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data):
        if isinstance(data, dict):
            return {
                key: value for key, value in data.items()
                if not (value is None and key in cls.model_fields)
            }
        return data
