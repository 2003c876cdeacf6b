"""Role names carried in bearer-token claims."""

ADMIN = "Admin"
AGENT = "Agent"
CUSTOMER = "Customer"
