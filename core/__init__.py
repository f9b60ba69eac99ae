# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the user logic behind the API:
# - models/: Pydantic schemas for requests, rows and the response envelope
# - services/: UserService (validation + one statement per operation)
# - validation.py: id, required-field and email checks
# - schema.py: users table bootstrap
# =============================================================================
