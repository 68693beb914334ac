# --- CONFIGURATION ---
TOP_K = 5 # Maximum number of documents returned by a search

def find_keyword(keywords_index, keyword):
    #Return the occurrence list for a keyword, None if it was never indexed
    return keywords_index.get(keyword)

def _take(docs, occs, index, limit):
    #Append the document at occs[index] unless it is already in the results
    if len(docs) < limit and occs[index].document not in docs:
        docs.append(occs[index].document)

def top5search(keywords_index, kw1, kw2, limit=TOP_K):
    """
    Search result for "kw1 or kw2", arranged in descending order of frequency.
    A matching document appears only once, ties go to the first keyword, and
    at most `limit` documents are returned. No matches gives an empty list.

    Keywords are used as-is: callers must pass them in normalized form.
    """
    docs = []
    first = find_keyword(keywords_index, kw1)
    second = find_keyword(keywords_index, kw2)

    if first is None and second is None:
        return docs

    #Only one keyword matched, walk its list in order
    if first is None or second is None:
        occs = first if first is not None else second
        index = 0
        while len(docs) < limit and index < len(occs):
            _take(docs, occs, index, limit)
            index += 1
        return docs

    #Both matched: merge the two descending lists
    i, j = 0, 0
    while i < len(first) and j < len(second) and len(docs) < limit:
        if first[i].frequency > second[j].frequency:
            _take(docs, first, i, limit)
            i += 1
        elif first[i].frequency < second[j].frequency:
            _take(docs, second, j, limit)
            j += 1
        else:
            #Tie: first keyword goes first, both pointers move even if a doc was skipped
            _take(docs, first, i, limit)
            _take(docs, second, j, limit)
            i += 1
            j += 1

    #Drain whatever is left of the other list
    while i < len(first) and len(docs) < limit:
        _take(docs, first, i, limit)
        i += 1
    while j < len(second) and len(docs) < limit:
        _take(docs, second, j, limit)
        j += 1

    return docs
