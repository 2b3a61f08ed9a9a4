from fastapi import APIRouter, Depends, status

from riyadah.api.v1.deps import get_current_identity
from riyadah.schemas.auth import LoginIn, ProfileUpdateIn, RegisterIn, TokenIdentity
from riyadah.services import auth_service
from riyadah.services.accounts import account_to_dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterIn):
    """
    Register a new standard user account.

    The email is normalized (trimmed, lower-cased) and must be unique among
    users. The account starts with the welcome bonus and a token is issued
    immediately, so the client is logged in after registering.

    Returns:
        dict: message, token, and the user without its password hash

    Errors:
        400: missing name/email/password, password too short, email taken
    """
    token, user = await auth_service.register(body)
    return {
        "message": "User registered successfully",
        "token": token,
        "user": account_to_dict(user, "user"),
    }


async def _login(body: LoginIn, role: str, label: str) -> dict:
    token, account = await auth_service.login(body.email, body.password, role)
    return {
        "message": f"{label} successful",
        "token": token,
        "user": account_to_dict(account, role),
    }


@router.post("/login")
async def login(body: LoginIn):
    """
    Authenticate a standard user.

    Unknown email and wrong password both answer 401 "Invalid email or password".
    Logout is client-side only: discard the token. The token itself stays
    valid until it expires.
    """
    return await _login(body, "user", "Login")


@router.post("/admin-login")
async def admin_login(body: LoginIn):
    return await _login(body, "admin", "Admin login")


@router.post("/host-login")
async def host_login(body: LoginIn):
    return await _login(body, "host", "Host login")


@router.post("/moderator-login")
async def moderator_login(body: LoginIn):
    return await _login(body, "moderator", "Moderator login")


@router.get("/profile")
async def get_profile(identity: TokenIdentity = Depends(get_current_identity)):
    """Return the caller's own account, from the partition matching the token role."""
    return await auth_service.get_profile(identity)


@router.put("/profile")
async def update_profile(body: ProfileUpdateIn, identity: TokenIdentity = Depends(get_current_identity)):
    """
    Update name and/or avatar. Standard users only; staff roles get 400.
    """
    return await auth_service.update_profile(identity, body)


@router.get("/dashboard")
async def dashboard(identity: TokenIdentity = Depends(get_current_identity)):
    """
    Aggregated dashboard for a standard user: account, tournaments, claimed
    rewards, the 5 latest activity entries and summary stats.
    """
    return await auth_service.get_dashboard(identity)
