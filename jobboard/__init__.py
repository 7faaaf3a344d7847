"""
IndustryJobs job board backend.

Core components:
- auth: identity provider, sessions and role resolution
- navigation: pages, authorization guard, controller and views
- session: per-user app context tying auth and navigation together
- services: profiles, jobs, applications, notifications, dashboards
- api: FastAPI application
"""
