# Supabase table: hero (single row)
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid or integer (primary key)
- greeting: text (nullable) - e.g. "Hello, I'm"
- name: text
- typing_texts: text[] - phrases cycled by the typing animation
- quote: text (nullable)
- social_links: jsonb - platform -> url, e.g. {"github": "...", "linkedin": "..."}
- updated_at: timestamp (nullable)
"""
