from dotenv import load_dotenv

# Load .env before anything reads os.environ (e.g. API_KEY in security.py).
load_dotenv()
