"""Templates fournis avec le builder (onglet « Templates » de la palette)."""
from typing import List

from ..core.schemas import Template

EDUCATION_HERO = Template(
    id="education-hero",
    name="Education Hero",
    category="Education",
    preview="hero",
    elements=[
        {
            "id": "hero-1",
            "type": "hero",
            "content": {
                "title": "Transform Your Future",
                "subtitle": "Start your educational journey with our expert guidance",
                "backgroundImage": "",
                "primaryButton": {"text": "Apply Now", "action": "#apply"},
                "secondaryButton": {"text": "Learn More", "action": "#about"},
            },
            "styles": {
                "backgroundColor": "#f8fafc",
                "padding": "80px 20px",
                "textAlign": "center",
                "minHeight": "600px",
            },
            "position": {"x": 0, "y": 0},
            "size": {"width": 1200, "height": 600},
        },
    ],
)

LEAD_CAPTURE = Template(
    id="lead-capture",
    name="Lead Capture",
    category="Marketing",
    preview="lead",
    elements=[
        {
            "id": "lead-1",
            "type": "header",
            "content": {"text": "Get Your Free Consultation", "level": 1},
            "styles": {"fontSize": 48, "fontWeight": "bold", "textAlign": "center", "color": "#1F2937"},
            "position": {"x": 50, "y": 50},
            "size": {"width": 700, "height": 80},
        },
        {
            "id": "lead-2",
            "type": "form",
            "content": {
                "fields": [
                    {"name": "name", "label": "Full Name", "type": "text", "required": True},
                    {"name": "email", "label": "Email", "type": "email", "required": True},
                    {"name": "phone", "label": "Phone", "type": "tel", "required": False},
                    {"name": "message", "label": "Message", "type": "textarea", "required": False},
                ],
                "submitText": "Get Free Consultation",
            },
            "styles": {
                "backgroundColor": "white",
                "padding": "40px",
                "borderRadius": "12px",
                "boxShadow": "0 4px 6px rgba(0,0,0,0.1)",
            },
            "position": {"x": 50, "y": 200},
            "size": {"width": 500, "height": 400},
        },
    ],
)

COURSE_SHOWCASE = Template(
    id="course-showcase",
    name="Course Showcase",
    category="Education",
    preview="course",
    elements=[
        {
            "id": "course-1",
            "type": "features",
            "content": {
                "title": "Popular Programs",
                "subtitle": "Discover our most sought-after courses",
                "features": [
                    {"title": "Business Administration", "description": "Comprehensive business education", "icon": "📊"},
                    {"title": "Computer Science", "description": "Cutting-edge technology programs", "icon": "💻"},
                    {"title": "Engineering", "description": "Innovative engineering solutions", "icon": "⚙️"},
                ],
            },
            "styles": {"padding": "60px 20px", "backgroundColor": "#ffffff"},
            "position": {"x": 0, "y": 0},
            "size": {"width": 1200, "height": 500},
        },
    ],
)


def builtin_templates() -> List[Template]:
    """Copies profondes : les constantes du module ne sont jamais exposées."""
    return [t.model_copy(deep=True) for t in (EDUCATION_HERO, LEAD_CAPTURE, COURSE_SHOWCASE)]
