# Supabase table: profiles
# Rows are created only by the signup trigger (or AuthService.provision_account)
# and removed by cascade when the auth.users identity is deleted.

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key)
- user_id: uuid (unique, not null, references auth.users.id on delete cascade)
- name: text (not null, default '')
- email: text (not null) - copied from auth.users at signup
- avatar_url: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now(), bumped by trigger on update)

Roles are deliberately not stored here: the owner may update this row, so a
role column would let users grant themselves privilege. See user_roles.
"""
