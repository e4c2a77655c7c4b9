from pydantic import BaseModel

"""
NAVIGATION ROUTE SCHEMA
"""


#Sidebar entry with its derived section and active state
class NavItemOut(BaseModel):
    href: str
    label: str
    icon: str
    section: str
    active: bool
