"""
Adapter: Homepage rendering.

Renders the index page with Jinja2. Templates ship inside the package.
"""

from typing import Optional

from jinja2 import Environment, PackageLoader, select_autoescape


class HomepageRenderer:
    """Renders the homepage from `templates/index.html`.

    The Jinja2 environment can be injected so tests can use an
    in-memory loader.
    """

    TEMPLATE_NAME = "index.html"

    def __init__(self, environment: Optional[Environment] = None) -> None:
        self._environment = environment or Environment(
            loader=PackageLoader("confessional", "templates"),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, confession: Optional[str], total_confessions: int) -> str:
        """Return the homepage HTML.

        Args:
            confession: Text of the confession to show, or None when there is none.
            total_confessions: Number of stored confessions.
        """
        template = self._environment.get_template(self.TEMPLATE_NAME)
        return template.render(
            confession=confession, total_confessions=total_confessions
        )
