# Supabase table: personal_info (single row)
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid or integer (primary key)
- name, title, email, phone, location: text
- bio, journey: text - about section copy
- degree, university, education_period: text
- linkedin_url, github_url, twitter_url, leetcode_url, website_url: text
- resume_url, profile_image_url: text - usually Cloudinary URLs
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

Only the first row is read or written.
"""
