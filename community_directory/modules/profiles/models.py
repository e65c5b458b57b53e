# Supabase table: profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# Rows are written only by the Clerk webhook (see modules/webhooks)

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, profile_id_for(clerk_id))
- clerk_id: text (unique, not null) - Clerk user id
- email: text (nullable) - primary email address
- username: text (nullable)
- first_name: text (nullable)
- last_name: text (nullable)
- full_name: text (nullable)
- avatar_url: text (nullable)
- updated_at: timestamp (not null)

Note: Clerk owns the identity. This table is a read-only mirror for the app,
kept at one row per Clerk user by upserting on id.
"""
