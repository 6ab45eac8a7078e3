from .builtin import COURSE_SHOWCASE, EDUCATION_HERO, LEAD_CAPTURE, builtin_templates
from .catalog import TemplateCatalog

__all__ = ["COURSE_SHOWCASE", "EDUCATION_HERO", "LEAD_CAPTURE", "builtin_templates", "TemplateCatalog"]
