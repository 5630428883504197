# Import all models to ensure they are registered with SQLAlchemy
from .journal import JournalEntry, EntryType

# Make models available at package level
__all__ = ['JournalEntry', 'EntryType']
