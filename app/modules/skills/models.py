# Supabase table: skills
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- name: text (not null)
- level: integer (0-100, not null)
- category: text (not null)
- icon_name: text (nullable) - icon identifier used by the frontend
- sort_order: integer (default: 0)
- is_featured: boolean (default: false)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
