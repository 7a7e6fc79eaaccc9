# Supabase table: experiences
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- title: text (not null) - role or degree
- company: text (not null) - employer or institution
- period: text (not null) - display string, e.g. "2022 - Present"
- type: text (experience | education)
- description: text[] - one bullet per element
- location: text (nullable)
- start_date: date (nullable) - used for ordering
- end_date: date (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
