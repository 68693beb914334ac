import logging
import time

from tokenizer import get_keyword
from indexer import (
    IndexingError,
    make_index,
    merge_keywords,
    load_keywords_from_document,
    load_noise_words,
)
from query_processor import top5search, find_keyword

# --- CONFIGURATION ---
DOCS_FILE = 'docs.txt'
NOISE_WORDS_FILE = 'noisewords.txt'

OPTIONS = {
    'r': '(r)un it all',
    'm': '(m)erge one document',
    'g': '(g)et keyword',
    'l': '(l)oad keywords from document',
    'f': '(f)ind keyword',
    't': '(t)op 5 search',
    'q': '(q)uit',
}

logger = logging.getLogger(__name__)


class SearchSession:
    """Holds the index and noise words between menu actions"""

    def __init__(self):
        self.keywords_index = {}
        self.noise_words = None # Not loaded yet

    def ensure_noise_words(self):
        # Single document actions need noise words even if nothing was indexed yet
        if self.noise_words is None:
            self.noise_words = load_noise_words(prompt("Enter noise words file", NOISE_WORDS_FILE))


def prompt(message, default=None):
    if default:
        message = f"{message} [{default}]"
    answer = input(f"{message} => ").strip()
    return answer or default

def get_option():
    menu = ", ".join(OPTIONS.values())
    response = input(f"\nChoose action: {menu} => ").strip().lower()
    while not response or response[0] not in OPTIONS:
        response = input(f"\tYou must enter one of {', '.join(OPTIONS)} => ").strip().lower()
    return response[0]

def run_all(session):
    docs_file = prompt("Enter docs file name", DOCS_FILE)
    noise_words_file = prompt("Enter noise words file name", NOISE_WORDS_FILE)

    start_time = time.time()
    # A failed pass leaves the previous index in place
    session.keywords_index, session.noise_words = make_index(docs_file, noise_words_file)
    elapsed_ms = (time.time() - start_time) * 1000

    for word, occs in session.keywords_index.items():
        print(f"key: {word} value: {occs}")
    print(f"\nIndexed {len(session.keywords_index)} keywords in {elapsed_ms:.2f} ms")

def merge_document(session):
    session.ensure_noise_words()
    doc_file = prompt("Enter document file name")
    merge_keywords(session.keywords_index, load_keywords_from_document(doc_file, session.noise_words))
    print(f"Merged {doc_file}")

def show_keyword(session):
    print(get_keyword(prompt("Enter the word to get the keyword for") or '', session.noise_words or set()))

def show_document_keywords(session):
    session.ensure_noise_words()
    doc_file = prompt("Enter the document to load from")
    for word, occurrence in load_keywords_from_document(doc_file, session.noise_words).items():
        print(f"key: {word} value: {occurrence}")

def find(session):
    word = (prompt("Enter the key to find") or '').lower()
    print(f"key: {word} value: {find_keyword(session.keywords_index, word)}")

def top_search(session):
    # Queries are matched exactly, so bring them into keyword form here
    kw1 = (prompt("Enter text for kw1") or '').lower()
    kw2 = (prompt("Enter text for kw2") or '').lower()

    docs = top5search(session.keywords_index, kw1, kw2)
    print(f"\n--- Top 5 docs for '{kw1}' or '{kw2}' ---")
    if not docs:
        print("No documents matched either keyword.")
    for i, doc in enumerate(docs):
        print(f"{i + 1}. {doc}")
    print("-" * 35)

ACTIONS = {
    'r': run_all,
    'm': merge_document,
    'g': show_keyword,
    'l': show_document_keywords,
    'f': find,
    't': top_search,
}

def main():
    session = SearchSession()
    print("Little Search Engine Ready (choose q to exit)")

    while True:
        option = get_option()
        if option == 'q':
            break
        print()
        try:
            ACTIONS[option](session)
        except IndexingError as e:
            logger.error(f"Action '{option}' failed: {e}")
    return session

# Main ui
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(message)s')
    main()
