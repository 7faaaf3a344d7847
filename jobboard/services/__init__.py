"""
Services over the relational store.

- jobs: postings, status, employer stats
- applications: applying and screening
- profiles: seeker/employer profiles, skills, education, certifications
- notifications: in-app notifications
- dashboards: per-role dashboard data
"""
