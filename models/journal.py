import enum

from extensions import db


class EntryType(str, enum.Enum):
    WORK = 'work'
    LEARNING = 'learning'
    INTERESTING = 'interesting'

    @classmethod
    def values(cls):
        return [member.value for member in cls]


class JournalEntry(db.Model):
    __tablename__ = 'journal_entries'

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False)
    # Free string; the three EntryType values are a UI convention only
    type = db.Column(db.String(50), nullable=False)
    text = db.Column(db.Text, nullable=False)

    def __init__(self, date, type, text):
        self.date = date
        self.type = type
        self.text = text

    def to_dict(self):
        return {
            'id': self.id,
            'date': self.date.isoformat(),
            'type': self.type,
            'text': self.text,
        }

    def __repr__(self):
        return f'<JournalEntry {self.date} {self.type}>'
