import time

DIRTY_MARK = " [+]"


def render_status(context, width):
    """
    context keys: status_msg, status_until, panel, note, dirty, row, col
    """
    text = ""
    now = time.time()
    if context.get('status_msg') and now < context.get('status_until', 0):
        text = f" {context['status_msg']}"
    else:
        panel = context.get('panel', 'content')
        note = context.get('note') or ''
        if note and context.get('dirty'):
            note += DIRTY_MARK
        row = context.get('row', 0)
        col = context.get('col', 0)
        text = f" {panel} | {note} | Ln {row + 1}, Col {col + 1}"

    return text.ljust(width)[:width]
