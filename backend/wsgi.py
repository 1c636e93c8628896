import os
from company_site import create_app

app = create_app(os.getenv("FLASK_CONFIG", "development"))

if __name__ == "__main__":
    app.run(port=int(os.getenv("PORT", "3000")))
