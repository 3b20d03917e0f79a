# Supabase table: activity_logs
# Append-only audit trail; written as a side effect of every mutating request.

"""
Expected Supabase table structure:
- id: uuid (primary key)
- user_id: uuid (nullable) - acting user; null for service paths
- action_type: text (not null) - create, update, delete, complete, resolve
- entity_type: text (not null) - travel_post, emergency_request, errand_request, carpool_ride, profile
- entity_id: uuid (nullable)
- details: jsonb (nullable)
- created_at: timestamp (default: now())

RLS: INSERT always allowed; SELECT when user_id = auth.uid() or caller is admin.
"""
