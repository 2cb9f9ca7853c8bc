from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class BookPayload(BaseModel):
    """Fields accepted when a book is added to a shelf."""
    shelf_name: str = 'to_read'
    title: str = Field(min_length=1, max_length=255)
    author_name: Optional[str] = Field(default=None, max_length=255)
    number_of_pages: Optional[int] = Field(default=None, ge=0)
    pages_read: Optional[int] = Field(default=None, ge=0)
    rating: Optional[int] = Field(default=None, ge=0, le=10)
    date_started_reading: Optional[date] = None
    date_finished_reading: Optional[date] = None

    @field_validator('title')
    @classmethod
    def strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('title must not be blank')
        return value

    @model_validator(mode='after')
    def check_dates(self):
        if (
            self.date_started_reading
            and self.date_finished_reading
            and self.date_finished_reading < self.date_started_reading
        ):
            raise ValueError('date_finished_reading must not be before date_started_reading')
        return self


class MoveBookPayload(BaseModel):
    shelf_name: str
    date_finished_reading: Optional[date] = None
