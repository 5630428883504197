import logging
import time
from datetime import date

from flask import (
    Blueprint,
    render_template,
    redirect,
    url_for,
    request,
    jsonify,
    abort,
    current_app,
)

from entry_store import get_entry_store
from forms import JournalEntryForm
from utils.helpers import wants_json
from utils.weeks import normalize_entries, group_entries_by_week, parse_entry_date

logger = logging.getLogger(__name__)

# Create blueprint
journal_bp = Blueprint('journal', __name__)


@journal_bp.route('/', methods=['GET'])
def index():
    entries = normalize_entries(get_entry_store().list_all_entries())
    weeks = group_entries_by_week(entries)

    if wants_json():
        return jsonify({'entries': entries, 'weeks': weeks})

    return render_template(
        'journal.html',
        form=JournalEntryForm(formdata=None),
        weeks=weeks,
        today=date.today().isoformat(),
    )


@journal_bp.route('/', methods=['POST'])
def create_entry():
    form = JournalEntryForm()

    # Artificial latency so the in-flight form state is visible
    delay = current_app.config.get('JOURNAL_SUBMIT_DELAY') or 0
    if delay > 0:
        time.sleep(delay)

    # Only form bodies; a JSON body would be coerced into form data
    if request.is_json or not form.validate_on_submit():
        logger.warning(f"Rejected journal submission: {form.errors}")
        abort(400)

    # Rejected here as a bad request rather than failing in the database
    try:
        entry_date = parse_entry_date(form.date.data)
    except ValueError:
        logger.warning(f"Rejected journal submission with date {form.date.data!r}")
        abort(400)

    entry = get_entry_store().create_entry(
        date=entry_date,
        type=form.type.data,
        text=form.text.data,
    )

    if wants_json():
        return jsonify(entry.to_dict()), 201
    return redirect(url_for('journal.index'))
