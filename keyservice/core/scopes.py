"""Static catalog of known scopes.

Keys may carry scopes outside this list; the catalog only feeds the dashboard and
GET /api/scopes.
"""

from keyservice.models.keys import Scope

SCOPES = [
    Scope(id="read", name="Read", description="Read access to resources"),
    Scope(id="write", name="Write", description="Create and update resources"),
    Scope(id="delete", name="Delete", description="Delete resources"),
    Scope(id="deploy", name="Deploy", description="Deploy services"),
    Scope(id="admin", name="Admin", description="Full administrative access"),
    Scope(id="webhooks", name="Webhooks", description="Manage webhooks"),
    Scope(id="email", name="Email", description="Send emails"),
    Scope(id="agents", name="Agents", description="Manage agents"),
]
