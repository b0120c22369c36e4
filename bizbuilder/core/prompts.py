"""Prompts, tool schema and image prompt templates sent to the AI gateway"""

CONTENT_SYSTEM_PROMPT = (
    "You are a professional website content generator. Generate complete, realistic content "
    "for a business website based on the user's prompt. Use the generate_website_content "
    "function to return the structured data."
)

CONTENT_TOOL_NAME = "generate_website_content"

# JSON Schema for the forced tool call
WEBSITE_CONTENT_TOOL = {
    "type": "function",
    "function": {
        "name": CONTENT_TOOL_NAME,
        "description": (
            "Generate structured website content including business name, hero section, "
            "about, services, testimonials, and contact info"
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "business_name": {
                    "type": "string",
                    "description": "The name of the business",
                },
                "hero_title": {
                    "type": "string",
                    "description": "Compelling headline for hero section",
                },
                "hero_subtitle": {
                    "type": "string",
                    "description": "Engaging subtitle (1-2 sentences)",
                },
                "about": {
                    "type": "string",
                    "description": "Detailed about section (3-4 sentences)",
                },
                "services": {
                    "type": "array",
                    "description": "Array of 3-6 services",
                    "minItems": 3,
                    "maxItems": 6,
                    "items": {
                        "type": "object",
                        "properties": {
                            "title": {"type": "string"},
                            "description": {"type": "string"},
                            "icon": {"type": "string", "description": "Appropriate emoji"},
                        },
                        "required": ["title", "description", "icon"],
                    },
                },
                "testimonials": {
                    "type": "array",
                    "description": "Array of 3-4 testimonials with generic names",
                    "minItems": 3,
                    "maxItems": 4,
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {
                                "type": "string",
                                "description": "Generic name like 'Sarah M.' or 'John D.'",
                            },
                            "text": {"type": "string"},
                            "rating": {"type": "number", "minimum": 1, "maximum": 5},
                        },
                        "required": ["name", "text", "rating"],
                    },
                },
                "contact": {
                    "type": "string",
                    "description": "Contact information text",
                },
                "business_type": {
                    "type": "string",
                    "description": "Industry category for image generation (e.g., bakery, yoga studio, photography)",
                },
            },
            "required": [
                "business_name",
                "hero_title",
                "hero_subtitle",
                "about",
                "services",
                "testimonials",
                "contact",
                "business_type",
            ],
        },
    },
}

CONTENT_TOOL_CHOICE = {"type": "function", "function": {"name": CONTENT_TOOL_NAME}}

HERO_PROMPT_TEMPLATE = (
    "professional hero banner image for {business_name}, {business_type}, "
    "modern, high quality, cinematic lighting"
)

GALLERY_PROMPT_TEMPLATES = (
    "{business_type} interior, professional, bright, welcoming atmosphere",
    "{business_type} product or service showcase, clean, modern aesthetic",
    "{business_type} team or workspace, professional, collaborative environment",
)

IMAGE_MODALITIES = ["image", "text"]
