# Supabase Auth
# Identities live in auth.users, managed by Supabase Auth.
# Creating an identity fires the handle_new_user trigger
# (supabase/migrations), which inserts the matching profiles and
# user_roles rows in the same transaction.

"""
Supabase Auth provides:
- auth.sign_up() - Register new users
- auth.sign_in_with_password() - Authenticate users
- auth.get_user() - Get current user from JWT token
- auth.sign_out() - Logout users
- auth.admin.delete_user() - Remove an identity (service role only)

Signup metadata: {"name": <display name>} is copied into profiles.name;
missing name becomes ''.
"""
