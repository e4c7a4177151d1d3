"""
Flask REST API for the PocketCalc web keypad
Drives one shared calculator session over JSON
"""
from flask import Flask, jsonify, request
from flask_cors import CORS
from keypad import Keypad
import config

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes

# One session; requests are applied in arrival order
keypad = Keypad()


def use_keypad(pad):
    """Serve an existing session (the GUI's) instead of a private one"""
    global keypad
    keypad = pad


def _state_response():
    return jsonify({'success': True, 'data': keypad.state.to_dict()})


def _bad_request(error):
    return jsonify({'success': False, 'error': error}), 400


@app.route('/api')
def api_info():
    """API information page"""
    return f"""
    <html>
    <head><title>{config.APP_NAME} API</title></head>
    <body style="font-family: Arial; padding: 40px; background: #000000; color: white;">
        <h1>{config.APP_NAME} Web Keypad</h1>
        <h2>Available Endpoints:</h2>
        <ul>
            <li><a href="/api/state" style="color: #FF9500;">GET /api/state</a> - Current calculator state</li>
            <li>POST /api/press - Press keys: {{"key": "7"}} or {{"keys": "5+3="}}</li>
            <li>POST /api/clear - Reset the calculator</li>
        </ul>
    </body>
    </html>
    """


@app.route('/api/state')
def get_state():
    """Get the current calculator state"""
    with keypad.lock:
        return _state_response()


@app.route('/api/press', methods=['POST'])
def press():
    """Press a single key or a sequence of keys"""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return _bad_request("Expected a JSON object with 'key' or 'keys'")
    if 'key' in payload:
        keys = [payload['key']]
    elif 'keys' in payload:
        keys = payload['keys']
        if not isinstance(keys, (str, list)):
            return _bad_request("'keys' must be a string or a list")
    else:
        return _bad_request("Expected 'key' or 'keys'")

    if not all(isinstance(k, str) for k in keys):
        return _bad_request("Keys must be strings")

    try:
        with keypad.lock:
            # Keys before an unknown one stay applied
            for key in keys:
                if not keypad.press(key):
                    return jsonify({'success': False, 'error': f"Unknown key: {key!r}",
                                    'data': keypad.state.to_dict()}), 400
            return _state_response()
    except Exception as e:
        app.logger.exception("Key press failed")
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/clear', methods=['POST'])
def clear():
    """Reset the calculator"""
    with keypad.lock:
        keypad.press('C')
        return _state_response()


if __name__ == '__main__':
    print("\n" + "="*60)
    print(f"{config.APP_NAME} Web Keypad API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}/api")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}/api")
    print("="*60 + "\n")

    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)
