from datetime import date

from utils.weeks import parse_entry_date


def ordinal(day):
    if 11 <= day % 100 <= 13:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(day % 10, 'th')
    return f"{day}{suffix}"


def register_filters(app):
    """Register custom template filters."""

    @app.template_filter('week_label')
    def week_label(value):
        """Render a week start as e.g. ``Jan 7th``."""
        if not value:
            return ''
        if not isinstance(value, date):
            value = parse_entry_date(value)
        return f"{value.strftime('%b')} {ordinal(value.day)}"

    return app
