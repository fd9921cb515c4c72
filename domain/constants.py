"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for routes, labels and user-facing messages.
"""

# Collection holding registered users in the remote store
USERS_COLLECTION = "users"

# Client-side routes
ROUTE_REGISTER = "/"
ROUTE_USERS = "/users"

# Prefix glyphs for notifications
SUCCESS_GLYPH = "✓"
ERROR_GLYPH = "❌"

# Notification messages. Error templates are completed with the store error text.
MSG_REGISTERED = f"{SUCCESS_GLYPH} User Registered Successfully!"
MSG_REGISTER_FAILED = f"{ERROR_GLYPH} Error registering user: "
MSG_LOAD_FAILED = f"{ERROR_GLYPH} Error fetching users: "
MSG_UPDATED = f"{SUCCESS_GLYPH} User updated successfully!"
MSG_UPDATE_FAILED = f"{ERROR_GLYPH} Error updating user: "
MSG_DELETED = f"{SUCCESS_GLYPH} User deleted successfully!"
MSG_DELETE_FAILED = f"{ERROR_GLYPH} Error deleting user: "

CONFIRM_DELETE = "Are you sure you want to delete this user?"

# Validation messages
ERR_FULL_NAME_REQUIRED = "Full Name is required"
ERR_EMAIL_REQUIRED = "Email is required"
ERR_EMAIL_INVALID = "Invalid email"
ERR_PHONE_REQUIRED = "Phone is required"
ERR_PHONE_SHORT = "Phone must be at least 10 digits"
ERR_ADDRESS_REQUIRED = "Address is required"

MIN_PHONE_LENGTH = 10

# Registration form labels, keyed by document field
FORM_LABELS = {
    "fullName": "👤 Full Name *",
    "email": "📧 Email *",
    "phone": "📱 Phone Number *",
    "address": "🏠 Address *",
    "profession": "💼 Profession (Optional)",
}

FORM_PLACEHOLDERS = {
    "fullName": "Enter your full name",
    "email": "Enter your email",
    "phone": "Enter your phone number",
    "address": "Enter your address",
    "profession": "Enter your profession",
}

SUBMIT_LABEL = "✓ Register Now"
SUBMITTING_LABEL = "⏳ Registering..."

# Listing table
TABLE_HEADERS = ["Name", "Email", "Phone", "Address", "Profession", "Actions"]
MISSING_VALUE = "N/A"
LOADING_TEXT = "⏳ Loading users..."
EMPTY_TEXT = "📭 No users registered yet"
