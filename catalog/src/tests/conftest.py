import logging

import pytest

from catalog.core.logging import archive_logger, audit_logger
from catalog.src.models.archive import Archive
from catalog.src.schema.materials import (
    BookDetails,
    BookSubtypeEnum,
    JournalDetails,
    JournalSubtypeEnum,
    Material,
    MaterialTypeEnum,
    NewspaperDetails,
    NewspaperSubtypeEnum,
)
from catalog.src.services.archive import add_material


class RecordingHandler(logging.Handler):
    """Keeps emitted records so tests can inspect them."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def book():
    return Material(
        title="Dune",
        type=MaterialTypeEnum.book,
        details=BookDetails(pages=412, author="Frank Herbert", subtype=BookSubtypeEnum.NOVEL),
    )


@pytest.fixture
def journal():
    return Material(
        title="Nature",
        type=MaterialTypeEnum.journal,
        details=JournalDetails(issue=7, publisher="Springer", subtype=JournalSubtypeEnum.SCIENCE),
    )


@pytest.fixture
def newspaper():
    return Material(
        title="The Times",
        type=MaterialTypeEnum.newspaper,
        details=NewspaperDetails(editor="Tony Gallagher", subtype=NewspaperSubtypeEnum.DAILY),
    )


@pytest.fixture
def make_book():
    """Factory for books with distinct titles"""
    def _make_book(title, author="Author Name", pages=200, subtype=BookSubtypeEnum.NOVEL):
        return Material(
            title=title,
            type=MaterialTypeEnum.book,
            details=BookDetails(pages=pages, author=author, subtype=subtype),
        )
    return _make_book


@pytest.fixture
def empty_archive():
    return Archive()


@pytest.fixture
def archive(book, journal, newspaper):
    """Archive holding one book, one journal and one newspaper, in that order"""
    archive = Archive()
    for material in (book, journal, newspaper):
        add_material(archive, material)
    return archive


@pytest.fixture
def full_archive(make_book):
    archive = Archive()
    for i in range(archive.capacity):
        add_material(archive, make_book(f"Volume {i}"))
    return archive


@pytest.fixture
def audit_records():
    """Records emitted on the audit logger during the test"""
    handler = RecordingHandler()
    previous_level = audit_logger.level
    audit_logger.setLevel(logging.DEBUG)
    audit_logger.addHandler(handler)
    yield handler.records
    audit_logger.removeHandler(handler)
    audit_logger.setLevel(previous_level)


@pytest.fixture
def archive_records():
    """Records emitted on the archive logger during the test"""
    handler = RecordingHandler()
    previous_level = archive_logger.level
    archive_logger.setLevel(logging.DEBUG)
    archive_logger.addHandler(handler)
    yield handler.records
    archive_logger.removeHandler(handler)
    archive_logger.setLevel(previous_level)
