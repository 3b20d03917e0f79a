# Supabase table: emergency_requests
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- user_id: uuid (not null, references auth.users.id on delete cascade)
- reason: text (not null) - values: medical, safety, other
- location: text (not null)
- status: text (not null, default: 'open') - values: open, resolved
- resolved_at: timestamp (nullable)
- resolved_by: uuid (nullable, references auth.users.id)
- created_at: timestamp (default: now())

Lifecycle: open -> resolved, admin only. There is no path back to open.
RLS: SELECT by owner or admin; INSERT by owner; UPDATE/DELETE by admin.
"""
