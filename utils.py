import math

ALLOWED_EXTENSIONS = {'xlsx', 'csv'}


def allowed_file(filename):
    """Check if the file has a supported spreadsheet extension."""
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def to_int(value, default=0):
    """Integer from a spreadsheet cell ("12", 12.0, " 3 "), or ``default``."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if not isinstance(value, float):
        try:
            value = float(str(value).strip().replace(',', ''))
        except ValueError:
            return default
    # nan, inf and overflowed literals such as "1e400"
    if not math.isfinite(value):
        return default
    return int(value)
