from nltk.tokenize import WhitespaceTokenizer

# Characters that may be stripped from the end of a word
PUNCTUATION = '.,?:;!'

# Initialize the tokenizer (splits on runs of whitespace, keeps punctuation attached)
whitespace_tokenizer = WhitespaceTokenizer()

# Splits raw document text into whitespace-delimited tokens
def tokenize(text):
    return whitespace_tokenizer.tokenize(text)

def get_keyword(word, noise_words):
    """
    Returns the word as a keyword (lower case, trailing punctuation stripped)
    if it passes the keyword test, otherwise returns None
    """
    word = word.lower()

    # Single characters are never keywords
    if len(word) == 1:
        return None

    # Noise words are checked before any punctuation is stripped
    if word in noise_words:
        return None

    # Strip trailing punctuation until we hit a letter
    while word and not word[-1].isalpha():
        if word[-1] in PUNCTUATION:
            word = word[:-1]
        else:
            # Digits, quotes, hyphens etc. at the end disqualify the word
            return None

    # What is left must be purely alphabetic
    if not word or not word.isalpha():
        return None

    return word
