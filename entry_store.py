"""Persistence for journal entries."""
import logging
from datetime import date
from typing import List

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from models.journal import JournalEntry

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the database cannot complete a read or write."""


class EntryStore:
    """Create-and-list access to the ``journal_entries`` table.

    Only two operations exist: entries are never updated or deleted here.
    """

    def __init__(self, session):
        self.session = session

    def create_entry(self, date: date, type: str, text: str) -> JournalEntry:
        """Persist a new entry and return it with its generated id.

        Args:
            date: Calendar day the entry pertains to
            type: Category string, stored as given
            text: Entry content

        Raises:
            StorageError: If the insert or commit fails
        """
        entry = JournalEntry(date=date, type=type, text=text)
        try:
            self.session.add(entry)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to create journal entry: {str(e)}", exc_info=True)
            raise StorageError("Could not save journal entry") from e

        logger.info(f"Created journal entry {entry.id} ({entry.type}) for {entry.date}")
        return entry

    def list_all_entries(self) -> List[JournalEntry]:
        """Return every stored entry in storage order."""
        try:
            return (
                self.session.query(JournalEntry)
                .order_by(JournalEntry.id)
                .all()
            )
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to load journal entries: {str(e)}", exc_info=True)
            raise StorageError("Could not load journal entries") from e


def get_entry_store():
    """Return the store registered on the current app."""
    return current_app.extensions['entry_store']
