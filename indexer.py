import logging
from collections import Counter

# This simply ignores the warning about parsing XML documents
# "XMLParsedAsHTMLWarning: It looks like you're using an HTML parser to parse an XML document."
# This is harmless and we can keep treating these files as HTML
from bs4 import BeautifulSoup as bs
from bs4 import XMLParsedAsHTMLWarning
import warnings
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)

from tokenizer import tokenize, get_keyword

logger = logging.getLogger(__name__)

# --- CONFIGURATION ---
HTML_EXTENSIONS = ('.html', '.htm') # Documents with these endings are parsed as HTML first


class IndexingError(Exception):
    """Base class for everything that can go wrong while building the index"""


class InvalidInput(IndexingError, ValueError):
    """A document identifier was missing or empty"""


class DocumentNotFound(IndexingError, FileNotFoundError):
    """A document, noise word file or docs list could not be located"""

    def __init__(self, path):
        super().__init__(f"File not found: {path}")
        self.path = path


class DocumentUnreadable(IndexingError, OSError):
    """A file exists but cannot be read, e.g. it names a directory"""

    def __init__(self, path, reason):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class Occurrence:
    """
    One document's count for one keyword.
    The frequency only changes while that single document is being scanned
    """

    def __init__(self, document, frequency):
        self.document = document
        self.frequency = frequency

    def __eq__(self, other):
        if not isinstance(other, Occurrence):
            return NotImplemented
        return self.document == other.document and self.frequency == other.frequency

    def __repr__(self):
        return f"({self.document},{self.frequency})"


def _read_text(path):
    # Undecodable bytes are replaced rather than aborting the scan
    try:
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()
    except FileNotFoundError:
        raise DocumentNotFound(path) from None
    except OSError as e:
        raise DocumentUnreadable(path, e.strerror or e) from e

def read_document(doc_file):
    """
    Reads a document from disk and returns its raw whitespace-delimited tokens.
    HTML pages are reduced to their visible text first
    """
    content = _read_text(doc_file)

    if doc_file.lower().endswith(HTML_EXTENSIONS):
        # Parse HTML using bs
        content = bs(content, 'lxml').get_text(' ')

    return tokenize(content)

def load_noise_words(noise_words_file):
    return set(tokenize(_read_text(noise_words_file)))

def load_doc_list(docs_file):
    # Order matters: earlier documents win ties at equal frequency
    return tokenize(_read_text(docs_file))

def keyword_counts(tokens, noise_words):
    """Counts how often each keyword appears in a stream of raw tokens"""
    counts = Counter()
    for token in tokens:
        word = get_keyword(token, noise_words)
        if word is not None:
            counts[word] += 1
    return counts

def load_keywords_from_document(doc_file, noise_words, load_document=read_document):
    """
    Scans a document and returns a fresh map of keyword -> Occurrence for that
    document only. Raises InvalidInput for a missing identifier and lets the
    loader's DocumentNotFound propagate
    """
    if not doc_file:
        raise InvalidInput("Document identifier must not be empty")

    tokens = load_document(doc_file)

    keywords = {}
    for word, count in keyword_counts(tokens, noise_words).items():
        keywords[word] = Occurrence(doc_file, count)
    return keywords

def insert_last_occurrence(occs):
    """
    Moves the last occurrence in the list to its place in descending frequency
    order. Elements 0..n-2 are already in order, so the spot is found with a
    binary search over them.

    Returns the midpoints probed by the search (only used for testing),
    or None if there is nothing to reposition.
    """
    if len(occs) < 2:
        return None

    probes = []
    target = occs[-1].frequency
    lo, hi = 0, len(occs) - 2

    while lo < hi:
        mid = (lo + hi) // 2
        probes.append(mid)
        if occs[mid].frequency > target:
            lo = mid + 1
        elif occs[mid].frequency == target:
            # An equal frequency stops the search right here
            lo = hi = mid
            break
        else:
            hi = mid

    last = occs.pop()
    if target > occs[lo].frequency:
        occs.insert(lo, last)
    else:
        occs.insert(lo + 1, last)
    return probes

def merge_keywords(keywords_index, keys):
    """
    Merges the keywords of a single document into the master index, keeping each
    keyword's occurrence list in descending order of frequency
    """
    for word, occurrence in keys.items():
        if word not in keywords_index:
            keywords_index[word] = [occurrence]
        else:
            occs = keywords_index[word]
            occs.append(occurrence)
            probes = insert_last_occurrence(occs)
            logger.debug("Merged %s into '%s' (probes: %s)", occurrence, word, probes)

def build_index(doc_files, noise_words, load_document=read_document):
    """
    Indexes every document in the given order and returns the master index
    (keyword -> list of Occurrence, descending frequency).
    The first document that cannot be loaded aborts the whole pass
    """
    noise_words = set(noise_words)
    keywords_index = {}

    doc_count = 0
    for doc_file in doc_files:
        keys = load_keywords_from_document(doc_file, noise_words, load_document)
        merge_keywords(keywords_index, keys)
        doc_count += 1
        logger.info(f"Indexed {doc_file} ({len(keys)} keywords)")

    logger.info(f"Indexing complete: {doc_count} documents, {len(keywords_index)} unique keywords")
    return keywords_index

def make_index(docs_file, noise_words_file):
    """
    Loads the noise words, then indexes every document named in docs_file.
    Returns the master index together with the noise words it was built with
    """
    # load noise words first, they must be in place before any document is scanned
    noise_words = load_noise_words(noise_words_file)
    logger.info(f"Loaded {len(noise_words)} noise words from {noise_words_file}")

    doc_files = load_doc_list(docs_file)
    return build_index(doc_files, noise_words), noise_words
