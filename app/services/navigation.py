from app.schemas.navigation import NavItemOut


NAV_ITEMS = [
    {"href": "/admin", "label": "Dashboard", "icon": "home"},
    {"href": "/admin#calendar", "label": "Calendar", "icon": "calendar"},
    {"href": "/admin#services", "label": "Services", "icon": "sparkles"},
    {"href": "/admin#staff", "label": "Staff", "icon": "users"},
    {"href": "/admin#analytics", "label": "Analytics", "icon": "bar-chart"},
    {"href": "/admin#settings", "label": "Settings", "icon": "settings"},
]

LOGIN_PATH = "/admin/login"


#Fragment after "#", the bare admin path is the dashboard
def section_for(href: str) -> str:
    _, _, fragment = href.partition("#")
    return fragment or "dashboard"


def build_navigation(active_section: str = "dashboard") -> list[NavItemOut]:
    return [
        NavItemOut(
            **item,
            section=section_for(item["href"]),
            active=section_for(item["href"]) == active_section,
        )
        for item in NAV_ITEMS
    ]
