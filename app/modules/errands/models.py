# Supabase table: errand_requests

"""
Expected Supabase table structure:
- id: uuid (primary key)
- user_id: uuid (not null, references auth.users.id on delete cascade)
- title: text (not null)
- description: text (nullable)
- pickup_location: text (not null)
- delivery_location: text (not null)
- reward: text (nullable) - free text, no numeric validation
- status: text (not null, default: 'open') - values: open, completed
- created_at: timestamp (default: now())
- completed_at: timestamp (nullable)
- completed_by: uuid (nullable)

RLS: SELECT for everyone; INSERT/UPDATE/DELETE by owner only. Completion is an
UPDATE, so only the owner can mark an errand completed.
"""
