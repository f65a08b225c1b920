"""Loading and compiling the form template."""

from pathlib import Path

from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
)

from affordance_forms.exceptions import TemplateLoadException
from affordance_forms.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

FORM_TEMPLATE = "form.html"


def package_loader() -> BaseLoader:
    """Loader for the templates bundled with this package."""
    return PackageLoader("affordance_forms", "templates")


def directory_loader(template_dir: Path) -> BaseLoader:
    """Loader for a host-supplied template directory."""
    return FileSystemLoader(str(template_dir))


class TemplateLoader:
    """Compiles the form template once through a Jinja2 loader.

    Jinja2 loaders read the whole source and close the file before
    compiling, so nothing stays open once load() returns.
    """

    def __init__(self, loader: BaseLoader | None = None, name: str = FORM_TEMPLATE):
        self.name = name
        self.environment = Environment(
            loader=loader or package_loader(),
            autoescape=True,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def load(self) -> Template:
        """Read and compile the template.

        Returns:
            Compiled Jinja2 template, safe to share between threads

        Raises:
            TemplateLoadException: If the template is missing, unreadable or invalid
        """
        try:
            template = self.environment.get_template(self.name)
        except TemplateSyntaxError as e:
            log_with_context(
                logger,
                "error",
                "Failed to compile form template",
                template=self.name,
                error=str(e),
                line=e.lineno,
                event_type="template_compile_error",
            )
            raise TemplateLoadException(
                f"Invalid form template '{self.name}': {e}",
                details={"template": self.name, "line": e.lineno},
            ) from e
        except (TemplateNotFound, OSError, UnicodeDecodeError) as e:
            log_with_context(
                logger,
                "error",
                "Failed to read form template",
                template=self.name,
                error=str(e),
                error_type=type(e).__name__,
                event_type="template_load_error",
            )
            raise TemplateLoadException(
                f"Cannot read form template '{self.name}': {e}",
                details={"template": self.name},
            ) from e

        log_with_context(
            logger,
            "info",
            "Form template compiled",
            template=self.name,
            event_type="template_loaded",
        )
        return template
