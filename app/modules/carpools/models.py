# Supabase table: carpool_rides
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- driver_id: uuid (not null, references auth.users.id on delete cascade)
- from_location: text (not null)
- to_location: text (not null)
- departure_date: date (not null)
- departure_time: time (not null)
- seats_available: integer (not null, default: 1)
- seats_taken: integer (not null, default: 0)
- price_per_seat: numeric(10,2) (nullable)
- notes: text (nullable)
- status: text (not null, default: 'active') - values: active, completed
- created_at: timestamp (default: now())
- completed_at: timestamp (nullable)

No constraint ties seats_taken to seats_available.
RLS: SELECT for everyone; INSERT/UPDATE/DELETE by driver only.
"""
