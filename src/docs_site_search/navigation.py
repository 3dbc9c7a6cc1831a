"""Fixed sidebar navigation for the documentation site."""

from docs_site_search.models import NavigationItem

NAV_ITEMS: tuple[NavigationItem, ...] = (
    NavigationItem(title="Introduction", url="/"),
    NavigationItem(title="Project Architecture", url="/project-architecture"),
    NavigationItem(title="Technology Stack", url="/technology-stack"),
    NavigationItem(title="Project Structure", url="/project-structure"),
    NavigationItem(title="Core Components", url="/core-components"),
    NavigationItem(title="State Management", url="/state-management"),
    NavigationItem(title="Custom Hooks", url="/custom-hooks"),
    NavigationItem(title="API Integration", url="/api-integration"),
    NavigationItem(title="Authentication & Authorization", url="/authentication-authorization"),
    NavigationItem(title="Routing Structure", url="/routing-structure"),
    NavigationItem(title="Environment Configuration", url="/environment-configuration"),
    NavigationItem(title="Extending the Application", url="/extending-the-application"),
)


def static_nav_items() -> list[NavigationItem]:
    """Return the content-less navigation list in sidebar order."""
    return list(NAV_ITEMS)
