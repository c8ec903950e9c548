"""Quickstart example for polyphrase.

This example demonstrates basic usage of polyphrase for localization.

Note: Missing keys log a warning through the "polyphrase" logger. Configure
logging in your application to see them.
"""

import logging

from babel import Locale

from polyphrase import (
    InvalidConfigurationError,
    PhraseBook,
    build_rule_registry,
    cldr_rule_registry,
    transform_phrase,
)

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

# Example 1: Simple phrases
print("=" * 50)
print("Example 1: Simple Phrases")
print("=" * 50)

book = PhraseBook({
    "hello": "Hello, World!",
    "welcome": "Welcome to polyphrase!",
})

print(book.t("hello"))
# Output: Hello, World!

print(book.t("welcome"))
# Output: Welcome to polyphrase!

# Example 2: Interpolation
print("\n" + "=" * 50)
print("Example 2: Variable Interpolation")
print("=" * 50)

book.extend({
    "greeting": "Hello, %{name}!",
    "user_info": "%{first_name} %{last_name} (Age: %{age})",
})

print(book.t("greeting", {"name": "Alice"}))
# Output: Hello, Alice!

print(book.t("user_info", {"first_name": "Bob", "last_name": "Smith", "age": 30}))
# Output: Bob Smith (Age: 30)

print(book.t("user_info", {"first_name": "Bob"}))
# Output: Bob %{last_name} (Age: %{age})

# Example 3: Plurals (English)
print("\n" + "=" * 50)
print("Example 3: Plural Forms (English)")
print("=" * 50)

book.extend({"emails": "You have one email. |||| You have %{smart_count} emails."})

print(book.t("emails", 0))
# Output: You have 0 emails.

print(book.t("emails", {"smart_count": 1}))
# Output: You have one email.

print(book.t("emails", 5))
# Output: You have 5 emails.

# Example 4: Plurals (Russian - 3 forms!)
print("\n" + "=" * 50)
print("Example 4: Russian Plurals (3 forms)")
print("=" * 50)

ru_book = PhraseBook(
    {"cars": "%{smart_count} машина |||| %{smart_count} машины |||| %{smart_count} машин"},
    locale="ru-RU",
)

for count in (1, 3, 5, 21, 112):
    print(ru_book.t("cars", count))
# Output: 1 машина / 3 машины / 5 машин / 21 машина / 112 машин

# Example 5: Nested phrases and defaults
print("\n" + "=" * 50)
print("Example 5: Nested Phrases and Defaults")
print("=" * 50)

book.extend({"nav": {"home": "Home", "cta": {"join_now": "Join now!"}}})

print(book.t("nav.cta.join_now"))
# Output: Join now!

print(book.t("nav.settings", {"_": "Settings for %{user}", "user": "Raph"}))
# Output: Settings for Raph

print(book.t("nav.unknown"))
# Output: nav.unknown (and a WARNING log record)

# Example 6: Missing keys as templates
print("\n" + "=" * 50)
print("Example 6: allow_missing")
print("=" * 50)

lenient = PhraseBook(allow_missing=True)
print(lenient.t("Welcome %{name}", {"name": "Robert"}))
# Output: Welcome Robert

# Example 7: Custom token syntax
print("\n" + "=" * 50)
print("Example 7: Custom Token Syntax")
print("=" * 50)

mustache = PhraseBook({"hi": "Hi {{name}}"}, interpolation={"prefix": "{{", "suffix": "}}"})
print(mustache.t("hi", {"name": "Robert"}))
# Output: Hi Robert

try:
    PhraseBook(interpolation={"prefix": "||||"})
except InvalidConfigurationError as e:
    print(f"Rejected: {e.diagnostic.message if e.diagnostic else e}")
# Output: Rejected: "||||" token is reserved for pluralization

# Example 8: Custom plural rules
print("\n" + "=" * 50)
print("Example 8: Custom Plural Rules")
print("=" * 50)

rules = build_rule_registry(
    {"one_other": lambda n: 0 if n == 1 else 1, "none": lambda n: 0},
    {"one_other": ["en", "x1"], "none": ["x2"]},
)
template = "%{smart_count} thing |||| %{smart_count} things"
print(transform_phrase(template, 2, "x1", rule_registry=rules))
# Output: 2 things
print(transform_phrase(template, 2, "x2", rule_registry=rules))
# Output: 2 thing

# Example 9: CLDR plural rules via Babel
print("\n" + "=" * 50)
print("Example 9: CLDR Plural Rules")
print("=" * 50)

cldr_rules = cldr_rule_registry(["pl", "cy"])
pl_book = PhraseBook(
    {"files": "%{smart_count} plik |||| %{smart_count} pliki |||| %{smart_count} plików |||| "
              "%{smart_count} pliku"},
    locale=Locale("pl"),
    plural_rules=cldr_rules,
)
for count in (1, 2, 5, 1.5):
    print(pl_book.t("files", count))
# Output: 1 plik / 2 pliki / 5 plików / 1.5 pliku
