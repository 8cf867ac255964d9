"""Line-break normalization applied to raw post HTML before conversion."""

LINE_BREAK_TAG = '<br>'


def normalize_line_breaks(raw_html: str) -> str:
    """
    Turn literal line breaks into explicit ``<br>`` elements.

    WordPress stores author line breaks as bare newlines, which HTML (and
    therefore the Markdown converter) collapses into whitespace. Windows and
    old Mac line endings are folded into ``\\n`` first, so a CRLF pair yields
    a single ``<br>``.
    """
    content = raw_html.replace('\r\n', '\n').replace('\r', '\n')
    return content.replace('\n', LINE_BREAK_TAG)


__all__ = ['LINE_BREAK_TAG', 'normalize_line_breaks']
