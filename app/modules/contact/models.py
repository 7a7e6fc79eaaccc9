# Supabase table: contact_messages
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- name: text (not null)
- email: text (not null)
- subject: text (not null)
- message: text (not null)
- phone: text (nullable)
- status: text (unread | read | replied, default: unread)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
