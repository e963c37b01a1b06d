import os

from src.lab_attendance.lab_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(port=int(os.getenv("PORT", "3001")), debug=app.config["DEBUG"])
