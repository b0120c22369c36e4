"""
Site assembler: WebsiteContent + ImageSet -> index.html + styles.css.

Pure templating. Every interpolated value goes through Jinja2 autoescape,
and image URLs placed inside CSS ``url('...')`` are percent-encoded so a
stray quote or parenthesis cannot end the declaration.
"""

from datetime import datetime
from typing import Any, Optional

from jinja2 import DictLoader, Environment

from bizbuilder.models.schemas import DEFAULT_SCRIPT_JS, ImageSet, RenderedSite, WebsiteContent

STAR = "★"

_CSS_URL_ESCAPES = {
    "'": "%27",
    '"': "%22",
    "(": "%28",
    ")": "%29",
    "\\": "%5C",
    "\n": "",
    "\r": "",
    "\t": "",
}


def stars(rating: Any) -> str:
    """Star glyphs for a rating; no clamping, fractions truncate"""
    try:
        count = int(rating)
    except (TypeError, ValueError, OverflowError):
        return ""
    return STAR * count


def css_url(url: str) -> str:
    """Make a URL safe to place between the quotes of url('...')"""
    return "".join(_CSS_URL_ESCAPES.get(ch, ch) for ch in url.strip())


INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ content.business_name }}</title>
    <meta name="description" content="{{ content.hero_subtitle }}">
    <link rel="stylesheet" href="styles.css">
</head>
<body>
    <header>
        <nav>
            <div class="container">
                <h1 class="logo">{{ content.business_name }}</h1>
                <ul class="nav-menu">
{% for anchor, label in nav_links %}
                    <li><a href="#{{ anchor }}">{{ label }}</a></li>
{% endfor %}
                </ul>
            </div>
        </nav>
    </header>

    <main>
        <section id="home" class="hero"{% if images.hero|trim %} style="background-image: url('{{ images.hero|css_url }}');"{% endif %}>
            <div class="hero-overlay"></div>
            <div class="hero-content">
                <h2>{{ content.hero_title }}</h2>
                <p>{{ content.hero_subtitle }}</p>
                <a href="#contact" class="cta-button">Get Started</a>
            </div>
        </section>

        <section id="about" class="section">
            <div class="container">
                <h2>About Us</h2>
                <p>{{ content.about }}</p>
            </div>
        </section>

        <section id="services" class="section bg-light">
            <div class="container">
                <h2>Our Services</h2>
                <div class="services-grid">
{% for service in content.services %}
                    <div class="service-card">
                        <div class="service-icon">{{ service.icon }}</div>
                        <h3>{{ service.title }}</h3>
                        <p>{{ service.description }}</p>
                    </div>
{% endfor %}
                </div>
            </div>
        </section>

        <section id="gallery" class="section">
            <div class="container">
                <h2>Gallery</h2>
                <div class="gallery-grid">
{% for img in images.gallery %}
                    <img src="{{ img }}" alt="Gallery image" loading="lazy">
{% endfor %}
                </div>
            </div>
        </section>

        <section id="testimonials" class="section bg-light">
            <div class="container">
                <h2>What Our Clients Say</h2>
                <div class="testimonials-grid">
{% for t in content.testimonials %}
                    <div class="testimonial-card">
                        <div class="stars">{{ t.rating|stars }}</div>
                        <p>"{{ t.text }}"</p>
                        <p class="author">— {{ t.name }}</p>
                    </div>
{% endfor %}
                </div>
            </div>
        </section>

        <section id="contact" class="section">
            <div class="container">
                <h2>Contact Us</h2>
                <p>{{ content.contact }}</p>
                <form class="contact-form">
                    <input type="text" placeholder="Your Name" required>
                    <input type="email" placeholder="Your Email" required>
                    <textarea placeholder="Your Message" rows="5" required></textarea>
                    <button type="submit" class="cta-button">Send Message</button>
                </form>
            </div>
        </section>
    </main>

    <footer>
        <div class="container">
            <p>&copy; {{ year }} {{ content.business_name }}. All rights reserved.</p>
        </div>
    </footer>

    <script src="script.js"></script>
</body>
</html>"""

STYLES_CSS = """* {
    margin: 0;
    padding: 0;
    box-sizing: border-box;
}

:root {
    --primary-color: #2563eb;
    --secondary-color: #0891b2;
    --text-dark: #1f2937;
    --text-light: #6b7280;
    --bg-light: #f9fafb;
    --white: #ffffff;
}

body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
    line-height: 1.6;
    color: var(--text-dark);
}

.container {
    max-width: 1200px;
    margin: 0 auto;
    padding: 0 2rem;
}

/* Header */
header {
    background: var(--white);
    box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
    position: sticky;
    top: 0;
    z-index: 100;
}

nav {
    padding: 1rem 0;
}

nav .container {
    display: flex;
    justify-content: space-between;
    align-items: center;
}

.logo {
    font-size: 1.5rem;
    font-weight: bold;
    background: linear-gradient(135deg, var(--primary-color), var(--secondary-color));
    -webkit-background-clip: text;
    -webkit-text-fill-color: transparent;
}

.nav-menu {
    display: flex;
    list-style: none;
    gap: 2rem;
}

.nav-menu a {
    text-decoration: none;
    color: var(--text-dark);
    font-weight: 500;
    transition: color 0.3s;
}

.nav-menu a:hover {
    color: var(--primary-color);
}

/* Hero */
.hero {
    min-height: 600px;
    display: flex;
    align-items: center;
    background-color: var(--primary-color);
    background-size: cover;
    background-position: center;
    position: relative;
}

.hero-overlay {
    position: absolute;
    inset: 0;
    background: linear-gradient(135deg, rgba(37, 99, 235, 0.9), rgba(8, 145, 178, 0.7));
}

.hero-content {
    position: relative;
    z-index: 1;
    color: var(--white);
    max-width: 600px;
    padding: 4rem 2rem;
}

.hero-content h2 {
    font-size: 3rem;
    margin-bottom: 1rem;
    font-weight: 800;
}

.hero-content p {
    font-size: 1.25rem;
    margin-bottom: 2rem;
    opacity: 0.95;
}

.cta-button {
    display: inline-block;
    padding: 1rem 2rem;
    background: var(--white);
    color: var(--primary-color);
    text-decoration: none;
    border-radius: 0.5rem;
    font-weight: 600;
    transition: transform 0.3s, box-shadow 0.3s;
    border: none;
    cursor: pointer;
}

.cta-button:hover {
    transform: translateY(-2px);
    box-shadow: 0 10px 20px rgba(0, 0, 0, 0.2);
}

/* Sections */
.section {
    padding: 5rem 0;
}

.section h2 {
    font-size: 2.5rem;
    margin-bottom: 3rem;
    text-align: center;
}

.bg-light {
    background: var(--bg-light);
}

/* Services */
.services-grid {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
    gap: 2rem;
}

.service-card {
    background: var(--white);
    padding: 2rem;
    border-radius: 1rem;
    box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
    transition: transform 0.3s, box-shadow 0.3s;
}

.service-card:hover {
    transform: translateY(-5px);
    box-shadow: 0 10px 20px rgba(0, 0, 0, 0.15);
}

.service-icon {
    font-size: 3rem;
    margin-bottom: 1rem;
}

.service-card h3 {
    font-size: 1.5rem;
    margin-bottom: 1rem;
}

/* Gallery */
.gallery-grid {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
    gap: 1.5rem;
}

.gallery-grid img {
    width: 100%;
    height: 250px;
    object-fit: cover;
    border-radius: 0.75rem;
    transition: transform 0.3s;
}

.gallery-grid img:hover {
    transform: scale(1.05);
}

/* Testimonials */
.testimonials-grid {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
    gap: 2rem;
}

.testimonial-card {
    background: var(--white);
    padding: 2rem;
    border-radius: 1rem;
    box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
}

.stars {
    color: var(--secondary-color);
    font-size: 1.25rem;
    margin-bottom: 1rem;
}

.testimonial-card .author {
    font-weight: 600;
    margin-top: 1rem;
}

/* Contact Form */
.contact-form {
    max-width: 600px;
    margin: 2rem auto 0;
    display: flex;
    flex-direction: column;
    gap: 1rem;
}

.contact-form input,
.contact-form textarea {
    padding: 1rem;
    border: 1px solid #e5e7eb;
    border-radius: 0.5rem;
    font-family: inherit;
    font-size: 1rem;
}

.contact-form button {
    width: 100%;
}

/* Footer */
footer {
    background: var(--text-dark);
    color: var(--white);
    text-align: center;
    padding: 2rem 0;
}

/* Responsive */
@media (max-width: 768px) {
    .nav-menu {
        display: none;
    }

    .hero-content h2 {
        font-size: 2rem;
    }

    .section h2 {
        font-size: 2rem;
    }
}
"""

NAV_LINKS = (
    ("home", "Home"),
    ("about", "About"),
    ("services", "Services"),
    ("gallery", "Gallery"),
    ("testimonials", "Testimonials"),
    ("contact", "Contact"),
)

_env = Environment(
    loader=DictLoader({"index.html": INDEX_TEMPLATE}),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["stars"] = stars
_env.filters["css_url"] = css_url


def generate_html(content: WebsiteContent, images: ImageSet, year: Optional[int] = None) -> str:
    """Render index.html. ``year`` defaults to the current year (footer copyright)."""
    if year is None:
        year = datetime.now().year
    return _env.get_template("index.html").render(
        content=content,
        images=images,
        nav_links=NAV_LINKS,
        year=year,
    )


def generate_css() -> str:
    """styles.css does not depend on the content"""
    return STYLES_CSS


def assemble_site(content: WebsiteContent, images: ImageSet, year: Optional[int] = None) -> RenderedSite:
    return RenderedSite(
        html=generate_html(content, images, year=year),
        css=generate_css(),
        js=DEFAULT_SCRIPT_JS,
    )
