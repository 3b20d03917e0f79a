# Supabase table: travel_posts
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- user_id: uuid (not null, references auth.users.id on delete cascade)
- from_location: text (not null)
- to_location: text (not null)
- travel_date: date (not null)
- travel_time: time (not null)
- mode: text (not null) - values: bus, bike, walk, car
- status: text (not null, default: 'active')
- created_at: timestamp (default: now())

RLS: SELECT for any authenticated user; INSERT/UPDATE/DELETE by owner only.
"""
