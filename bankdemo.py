import logging
import sys
from dotenv import load_dotenv
from bankaccount.demo import format_transcript, run_demo
from bankaccount.models.exceptions import BankError
from config.settings import Settings

load_dotenv()

# Load settings from environment variables
settings = Settings.load()

logger = logging.getLogger('bankaccount')
logger.setLevel(settings.log_level)
handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
logger.addHandler(handler)

try:
    steps = run_demo(settings)
except BankError as err:
    logger.exception("Demonstration aborted")
    print(f"Unexpected error: {err}")
    sys.exit(1)

print()
print(format_transcript(steps))
