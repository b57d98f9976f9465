"""HTML status page listing the configured identifiers."""

from datetime import datetime
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

from .util import escape_html

PLACEHOLDER = "No UUID configured."

_STYLE = """
    body { font-family: -apple-system,BlinkMacSystemFont,Segoe UI,Roboto,Helvetica,Arial; padding:20px; line-height:1.6 }
    .box { border:1px solid #eee; padding:12px; border-radius:6px; margin-bottom:12px; background:#fafafa }
    textarea { width:100%; height:120px; font-family:monospace; }
"""

_SCRIPT = """
    function copyText() {
      const ta = document.getElementById('uuid_text');
      ta.select();
      try {
        document.execCommand('copy');
        alert('Copied to clipboard');
      } catch (e) {
        alert('Copy failed, please copy manually');
      }
    }
"""


def format_timestamp(now: Optional[datetime], tz: str) -> str:
    """Render ``now`` (default: current time) in timezone ``tz``."""
    zone = ZoneInfo(tz)
    if now is None:
        now = datetime.now(zone)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=zone)
    else:
        now = now.astimezone(zone)
    return now.strftime("%Y/%m/%d %H:%M:%S")


def render_main_page(uuids: Sequence[str], host: str, now: str) -> str:
    plain_text = "\n".join(uuids) if uuids else PLACEHOLDER
    if uuids:
        items = "".join(f"<li>{escape_html(u)}</li>" for u in uuids)
        ul_list = f"<ul>{items}</ul>"
    else:
        ul_list = f"<p>{PLACEHOLDER}</p>"
    return f"""<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <title>UUID List</title>
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <style>{_STYLE}  </style>
</head>
<body>
  <h1>UUID List</h1>
  <p>Host: <strong>{escape_html(host)}</strong> · Time: {escape_html(now)}</p>

  <div class="box">
    <h2>Plain-text list (one per line)</h2>
    <textarea readonly id="uuid_text">{escape_html(plain_text)}</textarea>
    <p><button onclick="copyText()">Copy list</button></p>
  </div>

  <div class="box">
    <h2>HTML list</h2>
    {ul_list}
  </div>

  <div class="box">
    <h2>Subscription</h2>
    <p>Subscribe: <a href="/sub">/sub</a> (one VLESS link per UUID, one per line)</p>
  </div>

  <script>{_SCRIPT}  </script>
</body>
</html>"""
