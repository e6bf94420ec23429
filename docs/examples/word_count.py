"""Count words of a text fed by a background thread."""

import threading

import pushseq


text = """producers describe sequences
nothing is computed until a consumer asks
consumers may stop producers at any time"""

lines = pushseq.Channel(maxsize=2)


def feed():
    for line in text.splitlines():
        lines.put(line)
    lines.close()


threading.Thread(target=feed).start()

words = pushseq.join(*(pushseq.split(line, " ")
                       for line in pushseq.consume_channel(lines)))
long_words, short_words = pushseq.partition(lambda w: len(w) > 4, words)


def count(counts, word):
    counts[word] = counts.get(word, 0) + 1
    return counts


counts = pushseq.reduce(count, long_words, {})
print(sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])))
print("longest:", pushseq.maximum(long_words, key=len))
print("short words:", pushseq.collect_list(short_words))
