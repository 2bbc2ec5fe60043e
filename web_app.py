from flask import Flask, request, render_template_string

from reba.config import get_settings
from reba.providers import get_provider
from reba.render import HtmlPort
from reba.service import present, search

app = Flask(__name__)

HTML = """
<!doctype html>
<title>REBA - Real Estate Search</title>
<h2>REBA</h2>
<form method="get">
  <input name="q" style="width:420px" placeholder="Address or 'Homes for sale in ...'" value="{{q|default('')}}" />
  <button type="submit">Search</button>
</form>
{% if demo_mode %}
<div class="demo-notice">Running in <strong>DEMO</strong> mode: results are sample data.</div>
{% endif %}
{% for message in errors %}
<div class="error-message">{{ message|safe }}</div>
{% endfor %}
<div id="results">
{% if cards %}
  {% for card in cards %}{{ card|safe }}{% endfor %}
{% elif not q %}
  <div class="welcome">
    <h2>Welcome to REBA</h2>
    <p>Your AI-powered real estate assistant</p>
    <p>Try searching for:</p>
    <ul>
      <li>"123 Main Street, Miami"</li>
      <li>"Homes for sale in Beverly Hills"</li>
      <li>"Show me properties in Manhattan"</li>
    </ul>
  </div>
{% endif %}
</div>
"""


@app.route("/", methods=["GET"])
def home():
    q = request.args.get("q", "").strip()
    port = HtmlPort()
    if q:
        settings = get_settings()
        result = search(q, get_provider(settings), limit=settings.default_limit)
        present(result, port)
    return render_template_string(
        HTML,
        q=q,
        errors=port.errors,
        cards=port.cards,
        demo_mode=get_settings().demo,
    )


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=False)
