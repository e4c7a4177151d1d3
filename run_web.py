"""
PocketCalc Web Keypad Launcher
Simple script to start the web keypad server
"""
import sys
import os

# Add current directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

print("Starting PocketCalc Web Keypad...")
print()

try:
    import config
    from api import app
except ImportError as e:
    print(f"Error importing modules: {e}")
    print("\nMake sure you have installed the required dependencies:")
    print("  pip install -e .")
    sys.exit(1)

try:
    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)
except OSError as e:
    print(f"Error starting server: {e}")
    print("\nTroubleshooting:")
    print("1. Check if another application is using the port")
    print(f"2. Set POCKETCALC_WEB_PORT to use a port other than {config.WEB_PORT}")
    sys.exit(1)
