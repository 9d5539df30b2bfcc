# main.py
# Local development server for the proxy.
# To run this:
# On Linux/macOS: export GEMINI_API_KEY="YOUR_API_KEY"  (or put it in a .env file)
# Then run: python main.py
from gemini_proxy import create_app

app = create_app()

if __name__ == '__main__':
    # Note: `debug=True` is for development only. Do not use in production.
    app.run(host='0.0.0.0', port=5001, debug=True)
