"""Development server for the color picker.

Usage
-----
$ pip install -e .
$ python main.py               # starts on http://127.0.0.1:5000

The browser side polls ``GET /color`` and posts slider / button input back;
see ``color_picker.app`` for the routes.
"""

from color_picker.app import create_app

if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
