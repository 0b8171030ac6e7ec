from enum import Enum
from typing import Annotated, Union

from pydantic import BaseModel, Field

from catalog.core.settings import settings

ShortText = Annotated[str, Field(max_length=settings.max_text_length)]


class MaterialTypeEnum(str, Enum):
    book = "book"
    journal = "journal"
    newspaper = "newspaper"


class BookSubtypeEnum(str, Enum):
    NOVEL = "novel"
    BIOGRAPHY = "biography"
    HISTORY = "history"


class JournalSubtypeEnum(str, Enum):
    SCIENCE = "science"
    LITERATURE = "literature"
    ART = "art"


class NewspaperSubtypeEnum(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class BookDetails(BaseModel):
    pages: int
    author: ShortText
    subtype: BookSubtypeEnum

    @property
    def creator(self) -> str:
        return self.author


class JournalDetails(BaseModel):
    issue: int
    publisher: ShortText
    subtype: JournalSubtypeEnum

    @property
    def creator(self) -> str:
        return self.publisher


class NewspaperDetails(BaseModel):
    editor: ShortText
    subtype: NewspaperSubtypeEnum

    @property
    def creator(self) -> str:
        return self.editor


MaterialDetails = Union[BookDetails, JournalDetails, NewspaperDetails]

# Which details variant and subtype enum belong to each material type
DETAILS_BY_TYPE = {
    MaterialTypeEnum.book: (BookDetails, BookSubtypeEnum),
    MaterialTypeEnum.journal: (JournalDetails, JournalSubtypeEnum),
    MaterialTypeEnum.newspaper: (NewspaperDetails, NewspaperSubtypeEnum),
}


class Material(BaseModel):
    """A single catalog entry.

    ``title`` is the identity key within an archive and is compared
    exactly (case-sensitive). Nothing checks that ``details`` is the
    variant matching ``type``; a mismatched record is stored as given
    and only surfaces when it is updated or searched by creator.
    """

    title: ShortText
    type: MaterialTypeEnum
    details: MaterialDetails


class AddResult(str, Enum):
    OK = "ok"
    FAILED = "failed"

    @property
    def ok(self) -> bool:
        return self is AddResult.OK

    @property
    def code(self) -> int:
        return 0 if self.ok else -1


class UpdateResult(str, Enum):
    OK = "ok"
    INVALID_ARCHIVE = "invalid_archive"
    INVALID_TITLE = "invalid_title"
    NOT_FOUND = "not_found"
    INVALID_BOOK_SUBTYPE = "invalid_book_subtype"
    INVALID_JOURNAL_SUBTYPE = "invalid_journal_subtype"
    INVALID_NEWSPAPER_SUBTYPE = "invalid_newspaper_subtype"
    INVALID_MATERIAL_TYPE = "invalid_material_type"

    @property
    def ok(self) -> bool:
        return self is UpdateResult.OK

    @property
    def code(self) -> int:
        """Numeric status; a missing archive and a missing title share -1."""
        return _UPDATE_CODES[self]


_UPDATE_CODES = {
    UpdateResult.OK: 0,
    UpdateResult.INVALID_ARCHIVE: -1,
    UpdateResult.INVALID_TITLE: -1,
    UpdateResult.NOT_FOUND: -2,
    UpdateResult.INVALID_BOOK_SUBTYPE: -3,
    UpdateResult.INVALID_JOURNAL_SUBTYPE: -4,
    UpdateResult.INVALID_NEWSPAPER_SUBTYPE: -5,
    UpdateResult.INVALID_MATERIAL_TYPE: -6,
}

# Failure reported when new details don't carry a valid subtype for the type
SUBTYPE_FAILURES = {
    MaterialTypeEnum.book: UpdateResult.INVALID_BOOK_SUBTYPE,
    MaterialTypeEnum.journal: UpdateResult.INVALID_JOURNAL_SUBTYPE,
    MaterialTypeEnum.newspaper: UpdateResult.INVALID_NEWSPAPER_SUBTYPE,
}
