# Supabase table: settings (single row)
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid or integer (primary key)
- maintenance_mode: boolean
- maintenance_message: text
- visible_sections: text[] - sections rendered on the homepage
- featured_sections: text[]
- show_footer, show_navigation, enable_animations: boolean
- contact_form_enabled, show_social_links, show_resume_button: boolean
- show_analytics: boolean
- hero_headline, hero_subheadline: text (nullable)
- default_theme: text (light | dark | system)
- accent_color: text - hex colour
- updated_at: timestamp (nullable)
"""
