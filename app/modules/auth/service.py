import logging
from supabase import Client
from app.modules.auth.schemas import LoginRequest, RegisterRequest, TokenResponse, RegisterResponse
from app.core.session import USER_ROLE
from fastapi import HTTPException
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, supabase: Client, service_supabase: Optional[Client] = None):
        self.supabase = supabase
        self.service_supabase = service_supabase or supabase

    def register(self, register_data: RegisterRequest) -> RegisterResponse:
        """Register a new user using Supabase Auth, then verify the derived profile and role"""
        name = (register_data.name or "").strip()
        try:
            auth_response = self.supabase.auth.sign_up({
                "email": register_data.email,
                "password": register_data.password,
                "options": {
                    "data": {"name": name}
                }
            })

            if not auth_response.user:
                raise HTTPException(status_code=400, detail="Failed to register user")
        except HTTPException:
            raise
        except Exception as e:
            error_message = str(e)
            if "already registered" in error_message.lower() or "already exists" in error_message.lower():
                raise HTTPException(status_code=400, detail="User already exists")
            raise HTTPException(status_code=500, detail=f"Registration failed: {error_message}")

        user = auth_response.user
        email = user.email or register_data.email
        self.provision_account(user.id, email, name)
        logger.info(f"Registered user {user.id}")

        return RegisterResponse(
            user_id=user.id,
            email=email,
            message="User registered successfully"
        )

    def provision_account(self, user_id: str, email: str, name: str = "") -> None:
        """Ensure exactly one profile and one default role row exist for a new identity.

        Normally the signup trigger has already created both; anything missing is
        created here with the service client. On failure the identity is deleted
        so no account exists without its profile and role.
        """
        try:
            profile = self.service_supabase.table("profiles")\
                .select("id")\
                .eq("user_id", user_id)\
                .execute()
            if not profile.data:
                self.service_supabase.table("profiles").insert({
                    "user_id": user_id,
                    "email": email,
                    "name": name or ""
                }).execute()

            role = self.service_supabase.table("user_roles")\
                .select("id")\
                .eq("user_id", user_id)\
                .eq("role", USER_ROLE)\
                .execute()
            if not role.data:
                self.service_supabase.table("user_roles").insert({
                    "user_id": user_id,
                    "role": USER_ROLE
                }).execute()
        except Exception as e:
            logger.error(f"Provisioning failed for {user_id}, removing identity: {e}")
            try:
                self.service_supabase.auth.admin.delete_user(user_id)
            except Exception as cleanup_error:
                logger.error(f"Could not remove identity {user_id}: {cleanup_error}")
            raise HTTPException(status_code=500, detail=f"Registration failed: {e}")

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Authenticate user using Supabase Auth"""
        try:
            auth_response = self.supabase.auth.sign_in_with_password({
                "email": login_data.email,
                "password": login_data.password
            })

            if not auth_response.user or not auth_response.session:
                raise HTTPException(status_code=401, detail="Invalid credentials")

            return TokenResponse(
                access_token=auth_response.session.access_token,
                token_type="bearer",
                user_id=auth_response.user.id,
                email=auth_response.user.email or login_data.email
            )
        except HTTPException:
            raise
        except Exception as e:
            error_message = str(e)
            if "invalid" in error_message.lower() or "credentials" in error_message.lower():
                raise HTTPException(status_code=401, detail="Invalid email or password")
            raise HTTPException(status_code=500, detail=f"Login failed: {error_message}")

    def get_current_user(self, token: str) -> Dict[str, Any]:
        """Get current user details from Supabase Auth token"""
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
            if not user_response or not user_response.user:
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            user = user_response.user
            return {
                "id": user.id,
                "email": user.email,
                "user_metadata": user.user_metadata or {},
            }
        except HTTPException:
            raise
        except Exception as e:
            error_msg = str(e)
            if "JWT" in error_msg or "expired" in error_msg.lower() or "invalid" in error_msg.lower():
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            raise HTTPException(status_code=401, detail="Authentication failed")

    def logout(self, token: str) -> bool:
        """Revoke the caller's session.

        Uses the admin sign-out with the caller's own JWT; the signing-in
        client is per request and holds no session to sign out of.
        """
        try:
            self.service_supabase.auth.admin.sign_out(token)
            return True
        except Exception as e:
            logger.warning(f"Sign-out failed: {e}")
            return False
