import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Remote REST API
API_URL = os.getenv("STAYFINDER_API_URL", "http://localhost:5000/api")

# Uploaded images are served from the API host, outside the /api prefix
UPLOAD_URL = os.getenv("STAYFINDER_UPLOAD_URL", "http://localhost:5000")

# Seconds before an API call is abandoned and reported as a network failure
REQUEST_TIMEOUT_SECONDS = 15.0

# Stripe Configuration (publishable key only - this is a client)
STRIPE_API_URL = os.getenv("STRIPE_API_URL", "https://api.stripe.com/v1")
STRIPE_PUBLISHABLE_KEY = os.getenv("STRIPE_PUBLISHABLE_KEY")
if not STRIPE_PUBLISHABLE_KEY:
    import warnings

    warnings.warn(
        "STRIPE_PUBLISHABLE_KEY not set! Payments will use a placeholder test key",
        RuntimeWarning,
        stacklevel=2,
    )
    STRIPE_PUBLISHABLE_KEY = "pk_test_placeholder"

# Session persistence
TOKEN_STORAGE_KEY = "token"  # noqa: S105 - storage key name, not a secret
TOKEN_PATH = Path(
    os.getenv("STAYFINDER_TOKEN_PATH", str(Path.home() / ".stayfinder" / "session.json"))
)
# Optional Fernet key (generate with: python -c "from cryptography.fernet import Fernet; print(Fernet.generate_key().decode())")
TOKEN_ENCRYPTION_KEY = os.getenv("STAYFINDER_TOKEN_ENCRYPTION_KEY")
