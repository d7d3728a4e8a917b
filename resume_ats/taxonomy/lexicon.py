from __future__ import annotations

from dataclasses import dataclass

STOP_WORDS: frozenset[str] = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "by", "for", "from",
        "has", "he", "in", "is", "it", "its", "of", "on", "that", "the",
        "to", "was", "were", "will", "with", "this", "but", "they",
        "have", "had", "what", "said", "each", "which", "their", "time",
        "if", "up", "out", "many", "then", "them", "these", "so", "some",
        "her", "would", "make", "like", "into", "him", "two", "more",
        "very", "after", "words", "long", "than", "first", "been", "call",
        "who", "oil", "sit", "now", "find", "down", "day", "did", "get",
        "come", "made", "may", "part", "over", "new", "sound", "take", "only",
        "little", "work", "know", "place", "year", "live", "me", "back", "give",
        "most", "thing", "our", "just", "name", "good", "sentence",
        "man", "think", "say", "great", "where", "help", "through", "much", "before",
        "line", "right", "too", "means", "old", "any", "same", "tell", "boy", "follow",
        "came", "want", "show", "also", "around", "form", "three", "small", "set",
        "put", "end", "does", "another", "well", "large", "must", "big", "even",
        "such", "because", "turn", "here", "why", "ask", "went", "men", "read",
        "need", "land", "different", "home", "us", "move", "try", "kind", "hand",
        "picture", "again", "change", "off", "play", "spell", "air", "away", "animal",
        "house", "point", "page", "letter", "mother", "answer", "found", "study", "still",
        "learn", "should", "america", "world", "high", "every", "near", "add", "food",
        "between", "own", "below", "country", "plant", "last", "school", "father", "keep",
        "tree", "never", "start", "city", "earth", "eye", "light", "thought", "head",
        "under", "story", "saw", "left", "don't", "few", "while", "along", "might",
        "close", "something", "seem", "next", "hard", "open", "example", "begin", "life",
        "always", "those", "both", "paper", "together", "got", "group", "often", "run",
        "important", "until", "children", "side", "feet", "car", "mile", "night", "walk",
        "white", "sea", "began", "grow", "took", "river", "four", "carry", "state",
        "once", "book", "hear", "stop", "without", "second", "later", "miss", "idea",
        "enough", "eat", "face", "watch", "far", "indian", "real", "almost", "let",
        "above", "girl", "sometimes", "mountain", "cut", "young", "talk", "soon", "list",
        "song", "leave", "family", "it's",
    }
)

TECH_TERMS: frozenset[str] = frozenset(
    {
        "javascript", "python", "java", "typescript", "react", "angular", "vue",
        "node", "express", "sql", "mongodb", "postgresql", "mysql", "aws", "azure",
        "docker", "kubernetes", "git", "agile", "scrum", "api", "rest", "graphql",
        "microservices", "devops", "ci", "cd", "linux", "unix", "html", "css",
        "sass", "less", "redux", "mobx", "jest", "testing", "tdd", "bdd",
    }
)

# Words that name a job-description section rather than a skill.
SECTION_TERMS: frozenset[str] = frozenset(
    {
        "required", "requirement", "requirements", "qualification", "qualifications",
        "skill", "skills", "competency", "competencies", "responsibilities", "duties",
        "preferred",
    }
)


@dataclass(frozen=True)
class Lexicon:
    stop_words: frozenset[str] = STOP_WORDS
    tech_terms: frozenset[str] = TECH_TERMS
    section_terms: frozenset[str] = SECTION_TERMS
