"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Default staff account creation on startup
- db: Database configuration, backend selection and connection management
- errors: Domain error taxonomy and JSON error handlers
- security: Password hashing and access tokens
"""
