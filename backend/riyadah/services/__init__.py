"""
Services Module

Business rules that sit between the routers and the ORM models:
- accounts: partition lookups by role, email normalization
- activity: append-only user activity log
- auth_service: registration, login, profile, dashboard
- ledger: reward store and atomic reward claims
- tournaments: tournament creation and participation
- games: game submission queue
"""
