# Supabase table: user_roles
# Sole source of privilege. Only readable by the row's user; there are no
# client-facing write policies, so roles change only through the service role
# (signup trigger, app/scripts/grant_role.py).

"""
Expected Supabase table structure:

app_role: enum ('admin', 'user')

user_roles:
- id: uuid (primary key)
- user_id: uuid (not null, references auth.users.id on delete cascade)
- role: app_role (not null, default 'user')
- created_at: timestamp (default: now())
- unique constraint on (user_id, role)

has_role(_user_id uuid, _role app_role) is a SECURITY DEFINER function used
by every admin check in the RLS policies; it reads user_roles without
re-entering that table's own policies.
"""
