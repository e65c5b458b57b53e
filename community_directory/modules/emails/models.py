# Supabase table: emails
# Append-only log of emails Clerk sent on the app's behalf

"""
Expected Supabase table structure:

emails:
- email_id: text (unique, not null) - Clerk email id
- user_id: text (nullable) - Clerk user id of the recipient
- to_address: text (nullable)
- subject: text (nullable)
- status: text (nullable) - e.g. queued, delivered
- type: text (nullable)
- created_at: timestamp (not null)

The unique constraint on email_id makes redelivered email.created events no-ops.
"""
