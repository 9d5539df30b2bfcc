# api/generate.py
# Vercel serverless function. Vercel picks up the module-level `app`.
from gemini_proxy import create_app

app = create_app()
