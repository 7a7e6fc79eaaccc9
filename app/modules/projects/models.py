# Supabase table: projects
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- title: text (not null)
- description: text (not null)
- image_url: text (nullable)
- category: text (nullable)
- technologies: text[] (default: '{}')
- demo_url: text (nullable)
- github_url: text (nullable)
- featured: boolean (default: false)
- status: text (completed | in-progress | planning, default: completed)
- sort_order: integer (default: 0)
- start_date: date (nullable)
- end_date: date (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
