"""
Preview renderer: the BizBuilder page with Preview / HTML / CSS tabs.

The Preview tab shows the exported index.html itself (stylesheet inlined,
inside a sandboxed iframe) rather than a second rendering of the
structured fields, so what the user previews is exactly what they export.
"""

from typing import List, Optional

from jinja2 import DictLoader, Environment
from pydantic import BaseModel

from bizbuilder.models.schemas import GeneratedWebsite
from bizbuilder.preview.export import DOWNLOAD_FILENAME, build_clipboard_text, build_download_text

EXAMPLE_PROMPTS = [
    "Create a website for my bakery called Sweet Oven",
    "Build a site for Mountain View Yoga Studio",
    "Design a portfolio for Alex Chen Photography",
    "Make a website for TechFix Computer Repair",
]

STYLESHEET_LINK = '<link rel="stylesheet" href="styles.css">'
SCRIPT_TAG = '<script src="script.js"></script>'


class PageMessage(BaseModel):
    level: str  # "error" | "success"
    text: str


class PreviewState(BaseModel):
    """Per-session UI state: nothing here outlives the page"""
    prompt: str = ""
    website: Optional[GeneratedWebsite] = None
    copied: bool = False
    message: Optional[PageMessage] = None


def preview_document(website: GeneratedWebsite) -> str:
    """index.html with styles.css inlined, suitable for iframe srcdoc"""
    style_block = f"<style>\n{website.css}\n</style>"
    html = website.html.replace(SCRIPT_TAG, "")
    if STYLESHEET_LINK in html:
        return html.replace(STYLESHEET_LINK, style_block)
    return style_block + html


PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>BizBuilder AI</title>
    <style>
        body { margin: 0; font-family: system-ui, sans-serif; background: #f5f7fb; color: #1f2937; }
        header { background: #fff; border-bottom: 1px solid #e5e7eb; padding: 1rem 2rem; display: flex; justify-content: space-between; align-items: center; }
        header h1 { margin: 0; font-size: 1.5rem; color: #2563eb; }
        main { display: grid; grid-template-columns: minmax(0, 1fr) minmax(0, 1fr); gap: 2rem; padding: 2rem; }
        .card { background: #fff; border-radius: 0.75rem; box-shadow: 0 4px 12px rgba(0, 0, 0, 0.06); padding: 1.5rem; margin-bottom: 1.5rem; }
        textarea { width: 100%; min-height: 200px; box-sizing: border-box; padding: 0.75rem; font: inherit; resize: none; }
        button, .button { display: inline-block; padding: 0.75rem 1.25rem; border-radius: 0.5rem; border: 1px solid #2563eb; background: #2563eb; color: #fff; font: inherit; cursor: pointer; text-decoration: none; }
        .button.outline, button.outline { background: #fff; color: #2563eb; }
        .examples button { display: block; width: 100%; text-align: left; margin-bottom: 0.5rem; background: #fff; color: #1f2937; border-color: #e5e7eb; }
        .message { padding: 0.75rem 1rem; border-radius: 0.5rem; margin-bottom: 1rem; }
        .message.error { background: #fee2e2; color: #991b1b; }
        .message.success { background: #dcfce7; color: #166534; }
        .tabs > input { display: none; }
        .tabs > label { display: inline-block; padding: 0.5rem 1rem; cursor: pointer; border-bottom: 2px solid transparent; }
        .tabs > input:checked + label { border-bottom-color: #2563eb; font-weight: 600; }
        .tab-panel { display: none; border-top: 1px solid #e5e7eb; }
        #tab-preview:checked ~ .panel-preview,
        #tab-html:checked ~ .panel-html,
        #tab-css:checked ~ .panel-css { display: block; }
        .tab-panel iframe { width: 100%; height: 800px; border: 0; }
        .tab-panel pre { margin: 0; padding: 1.5rem; max-height: 800px; overflow: auto; background: #f3f4f6; font-size: 0.85rem; }
        .empty { min-height: 600px; display: flex; flex-direction: column; align-items: center; justify-content: center; text-align: center; }
        @media (max-width: 1024px) { main { grid-template-columns: 1fr; } }
    </style>
</head>
<body>
    <header>
        <h1>BizBuilder AI</h1>
        <span>Generate complete business websites with AI</span>
    </header>
    <main>
        <div>
            <div class="card">
                <h2>Describe Your Business</h2>
{% if state.message %}
                <div class="message {{ state.message.level }}">{{ state.message.text }}</div>
{% endif %}
                <form method="post" action="/">
                    <textarea id="prompt" name="prompt" placeholder="E.g., Create a website for my bakery called Sweet Oven. We specialize in artisan breads and pastries...">{{ state.prompt }}</textarea>
                    <p><button type="submit">Generate Website</button></p>
                </form>
            </div>

            <div class="card examples">
                <h3>Try these examples:</h3>
{% for example in examples %}
                <button type="button" class="example" data-prompt="{{ example }}">{{ example }}</button>
{% endfor %}
            </div>
{% if state.website %}

            <div class="card">
                <h3>Export Options</h3>
                <a class="button outline" download="{{ download_filename }}" href="data:text/plain;charset=utf-8,{{ download_text|urlencode }}">Download</a>
                <button type="button" class="outline" id="copy-code">{% if state.copied %}Copied!{% else %}Copy Code{% endif %}</button>
                <textarea id="clipboard-text" hidden readonly>{{ clipboard_text }}</textarea>
            </div>
{% endif %}
        </div>

        <div>
{% if state.website %}
            <div class="card tabs">
                <input type="radio" name="tab" id="tab-preview" checked><label for="tab-preview">Preview</label>
                <input type="radio" name="tab" id="tab-html"><label for="tab-html">HTML</label>
                <input type="radio" name="tab" id="tab-css"><label for="tab-css">CSS</label>
                <div class="tab-panel panel-preview">
                    <iframe title="Website preview" sandbox srcdoc="{{ preview_srcdoc }}"></iframe>
                </div>
                <div class="tab-panel panel-html"><pre><code>{{ state.website.html }}</code></pre></div>
                <div class="tab-panel panel-css"><pre><code>{{ state.website.css }}</code></pre></div>
            </div>
{% else %}
            <div class="card empty">
                <h3>No Website Yet</h3>
                <p>Enter your business details and click generate to see your AI-powered website appear here</p>
            </div>
{% endif %}
        </div>
    </main>
    <script>
        document.querySelectorAll("button.example").forEach(function (button) {
            button.addEventListener("click", function () {
                document.getElementById("prompt").value = button.dataset.prompt;
            });
        });
        var copyButton = document.getElementById("copy-code");
        if (copyButton) {
            copyButton.addEventListener("click", function () {
                navigator.clipboard.writeText(document.getElementById("clipboard-text").value);
                copyButton.textContent = "Copied!";
                setTimeout(function () { copyButton.textContent = "Copy Code"; }, 2000);
            });
        }
    </script>
</body>
</html>
"""

_env = Environment(
    loader=DictLoader({"page.html": PAGE_TEMPLATE}),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_page(state: PreviewState, examples: Optional[List[str]] = None) -> str:
    """Render the whole BizBuilder page for the given UI state"""
    context = {
        "state": state,
        "examples": examples if examples is not None else EXAMPLE_PROMPTS,
        "download_filename": DOWNLOAD_FILENAME,
    }
    if state.website is not None:
        files = state.website.files()
        context.update(
            preview_srcdoc=preview_document(state.website),
            download_text=build_download_text(files),
            clipboard_text=build_clipboard_text(files),
        )
    return _env.get_template("page.html").render(**context)
