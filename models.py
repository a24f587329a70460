"""Database models for LoRA Tagger."""
from sqlmodel import Field, SQLModel


class Setting(SQLModel, table=True):
    """Remembered UI state (last directory, last scan time...)."""
    key: str = Field(primary_key=True)
    value: str
