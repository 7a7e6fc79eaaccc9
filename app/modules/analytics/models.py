# Supabase table: analytics
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- event_type: text (not null) - "page_view" or a custom event name
- page: text (nullable)
- ip_address: text (nullable)
- user_agent: text (nullable)
- referrer: text (nullable)
- metadata: jsonb (default: '{}')
- created_at: timestamp (default: now())
"""
