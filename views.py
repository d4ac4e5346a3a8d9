"""Template helpers shared by every view that displays a score"""


def is_missing_score(value):
    """
    Check whether a Metascore value means "no metascore"

    Absent (None), blank after trimming and any case of "N/A" all count
    as missing. Everything else, numbers included, is a real score.
    """
    if value is None:
        return True

    text = str(value).strip()
    return text == '' or text.lower() == 'n/a'


def register_template_helpers(app):
    """Expose the missing-score predicate to Jinja2 templates"""
    app.add_template_test(is_missing_score, 'missing_score')
    app.add_template_global(is_missing_score, 'is_missing_score')
