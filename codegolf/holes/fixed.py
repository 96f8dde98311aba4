"""Holes whose cases are a fixed table of arguments and answers, shuffled."""

from __future__ import annotations

import random
from typing import Sequence

_BRAINFUCK = (
    ("+++++++++++++++[>++>+++>++++>+++++>++++++>+++++++>++++++++<<<<<<<-]+++++++++++++++>>>++++++.>>+++++++.>>-----.<-.<<<<<<-----.", "Bash"),
    ("+++++++++++++++[>++>+++>++++>+++++>++++++>+++++++>++++++++<<<<<<<-]+++++++++++++++>>>>-.>+++++++.>>--.<<.<+++++++++.>++.>>----.<.>--.++++.<<<<<<<-----.", "JavaScript"),
    ("+++++++++++++++++++++++++[>++>+++>++++>+++++<<<<-]+++++++++++++++++++++++++>>+.>>--------.<---.<<<---------------.", "Lua"),
    ("+++++++++++++++++++++++++[>++>+++>++++>+++++<<<<-]+++++++++++++++++++++++++>>+++++.>+.>-----------.------.<<<<---------------.", "Perl"),
    ("+++++++++++++++[>++>+++>++++>+++++>++++++>+++++++>++++++++<<<<<<<-]+++++++++++++++>>>>+++++.>>----.>------.------.<<<<<<++.>>------.<<<-----.", "Perl 6"),
    ("+++++++++++++++++++++[>++>+++>++++>+++++>++++++<<<<<-]+++++++++++++++++++++>>>----.--------.++++++++.<<<-----------.", "PHP"),
    ("+++++++++++++++++++++[>++>+++>++++>+++++>++++++<<<<<-]+++++++++++++++++++++>>>----.>>-----.-----.<-.>-----.-.<<<<<-----------.", "Python"),
    ("+++++++++++++++++++++[>++>+++>++++>+++++>++++++<<<<<-]+++++++++++++++++++++>>>--.>>---------.<-------.>++++.<<<<<-----------.", "Ruby"),
    ("++++++++++++++++++[>++>+++>++++>+++++>++++++>+++++++<<<<<<-]++++++++++++++++++>>>-----.>>+++.<++++++++++.+.<<<----.>>++++.>>.---.<+.<<<<--------.", "Code Golf"),
    (">>>>>>>>>>>>>>>>>>>>>>>>>>>>++++++++++++++++++++++++++[-<<[+<]+[>]>][<<[[-]-----<]>[>]>]<<[++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++<]>[.>]++++++++++.", "abcdefghijklmnopqrstuvwxyz"),
    ("+++++[>+++++[>++>++>+++>+++>++++>++++<<<<<<-]<-]+++++[>>[>]<[+.<<]>[++.>>>]<[+.<]>[-.>>]<[-.<<<]>[.>]<[+.<]<-]++++++++++.", "eL34NfeOL454KdeJ44JOdefePK55gQ67ShfTL787KegJ77JTeghfUK88iV9:XjgYL:;:KfiJ::JYfijgZK;;k[<=]lh^L=>=KgkJ==J^gklh_K>>m`?@bnicL@A@KhmJ@@JchmnidKAA"),
)

_EMOJIFY = (
    (":-D", "😀"), (":-)", "🙂"), (":-|", "😐"), (":-(", "🙁"), (":-\\", "😕"),
    (":-*", "😗"), (":-O", "😮"), (":-#", "🤐"), ("':-D", "😅"), ("':-(", "😓"),
    (":'-)", "😂"), (":'-(", "😢"), (":-P", "😛"), (";-P", "😜"), ("X-P", "😝"),
    ("X-)", "😆"), ("O:-)", "😇"), (";-)", "😉"), (":-$", "😳"), (":-", "😶"),
    ("B-)", "😎"), (":-J", "😏"), ("}:-)", "😈"), ("}:-(", "👿"), (":-@", "😡"),
)

_UNITED_STATES = (
    ("Alabama", "AL"), ("Alaska", "AK"), ("Arizona", "AZ"), ("Arkansas", "AR"),
    ("California", "CA"), ("Colorado", "CO"), ("Connecticut", "CT"),
    ("Delaware", "DE"), ("District of Columbia", "DC"), ("Florida", "FL"),
    ("Georgia", "GA"), ("Hawaii", "HI"), ("Idaho", "ID"), ("Illinois", "IL"),
    ("Indiana", "IN"), ("Iowa", "IA"), ("Kansas", "KS"), ("Kentucky", "KY"),
    ("Louisiana", "LA"), ("Maine", "ME"), ("Maryland", "MD"),
    ("Massachusetts", "MA"), ("Michigan", "MI"), ("Minnesota", "MN"),
    ("Mississippi", "MS"), ("Missouri", "MO"), ("Montana", "MT"),
    ("Nebraska", "NE"), ("Nevada", "NV"), ("New Hampshire", "NH"),
    ("New Jersey", "NJ"), ("New Mexico", "NM"), ("New York", "NY"),
    ("North Carolina", "NC"), ("North Dakota", "ND"), ("Ohio", "OH"),
    ("Oklahoma", "OK"), ("Oregon", "OR"), ("Pennsylvania", "PA"),
    ("Rhode Island", "RI"), ("South Carolina", "SC"), ("South Dakota", "SD"),
    ("Tennessee", "TN"), ("Texas", "TX"), ("Utah", "UT"), ("Vermont", "VT"),
    ("Virginia", "VA"), ("Washington", "WA"), ("West Virginia", "WV"),
    ("Wisconsin", "WI"), ("Wyoming", "WY"),
)

_ROCK_PAPER_SCISSORS_SPOCK_LIZARD = (
    ("💎💎", "Tie"),
    ("💎📄", "📄 covers 💎"),
    ("💎✂", "💎 crushes ✂"),
    ("💎🖖", "🖖 vaporizes 💎"),
    ("💎🦎", "💎 crushes 🦎"),
    ("📄💎", "📄 covers 💎"),
    ("📄📄", "Tie"),
    ("📄✂", "✂ cuts 📄"),
    ("📄🖖", "📄 disproves 🖖"),
    ("📄🦎", "🦎 eats 📄"),
    ("✂💎", "💎 crushes ✂"),
    ("✂📄", "✂ cuts 📄"),
    ("✂✂", "Tie"),
    ("✂🖖", "🖖 smashes ✂"),
    ("✂🦎", "✂ decapitates 🦎"),
    ("🖖💎", "🖖 vaporizes 💎"),
    ("🖖📄", "📄 disproves 🖖"),
    ("🖖✂", "🖖 smashes ✂"),
    ("🖖🖖", "Tie"),
    ("🖖🦎", "🦎 poisons 🖖"),
    ("🦎💎", "💎 crushes 🦎"),
    ("🦎📄", "🦎 eats 📄"),
    ("🦎✂", "✂ decapitates 🦎"),
    ("🦎🖖", "🦎 poisons 🖖"),
    ("🦎🦎", "Tie"),
)


def shuffled_pairs(
    args: Sequence[str], outs: Sequence[str], rng: random.Random | None = None
) -> tuple[list[str], str]:
    """Shuffle arguments and answers together; answers are joined by newlines."""
    if rng is None:
        rng = random.Random()
    pairs = list(zip(args, outs, strict=True))
    rng.shuffle(pairs)
    return [arg for arg, _ in pairs], "\n".join(out for _, out in pairs)


def _from_table(table, rng):
    return shuffled_pairs([a for a, _ in table], [o for _, o in table], rng)


def brainfuck(rng: random.Random | None = None) -> tuple[list[str], str]:
    return _from_table(_BRAINFUCK, rng)


def emojify(rng: random.Random | None = None) -> tuple[list[str], str]:
    return _from_table(_EMOJIFY, rng)


def united_states(rng: random.Random | None = None) -> tuple[list[str], str]:
    return _from_table(_UNITED_STATES, rng)


def rock_paper_scissors_spock_lizard(
    rng: random.Random | None = None,
) -> tuple[list[str], str]:
    return _from_table(_ROCK_PAPER_SCISSORS_SPOCK_LIZARD, rng)