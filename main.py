# main.py
import os

from dotenv import load_dotenv
load_dotenv()

from hotel_bonus.main import create_app

# Без DATABASE_URL и пароля (или AUTH_DISABLED=true) процесс не стартует:
# create_app поднимает ConfigurationError.
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "3000") or "3000"))
