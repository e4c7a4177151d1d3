"""
PocketCalc
Main application entry point
"""
import tkinter as tk
import socket
import threading
import config
import api
from gui import PocketCalcGUI
from keypad import Keypad


def get_local_ip():
    """Address other devices on the network can reach"""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            s.connect(('10.255.255.255', 1))
            return s.getsockname()[0]
    except OSError:
        return '127.0.0.1'


def start_web_keypad(pad):
    """Serve pad over HTTP from a daemon thread; it stops with the GUI"""
    api.use_keypad(pad)
    server = threading.Thread(
        target=api.app.run,
        kwargs={'host': config.WEB_HOST, 'port': config.WEB_PORT,
                'debug': False, 'use_reloader': False},
        daemon=True,
    )
    server.start()
    print("="*60)
    print(f"Web keypad on this PC:    http://localhost:{config.WEB_PORT}/api")
    print(f"Web keypad on your Phone: http://{get_local_ip()}:{config.WEB_PORT}/api")
    print("="*60)
    return server


def main():
    pad = Keypad()
    if config.WEB_ENABLED:
        start_web_keypad(pad)

    root = tk.Tk()
    app = PocketCalcGUI(root, pad)
    root.mainloop()


if __name__ == "__main__":
    main()
