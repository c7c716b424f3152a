# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Regular expression strings that are commonly useful when defining Tokenizer rules.
Note that rule order matters: list more specific patterns (e.g. keywords) before general ones (e.g. identifiers).
'''

# At least one whitespace character.
whitespace = r'\s+'

# A `#` or `//` comment, up to but not including the newline.
line_comment = r'(?:\#|//)[^\n]*'

# A letter, `_` or `$`, followed by any number of the same or digits.
identifier = r'(?:[^\W\d]|\$)(?:\w|\$)*'

# Integer or decimal number with optional exponent: `1`, `1.`, `1.5`, `.5`, `1e10`, `2.5E-3`.
number = r'(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?'

# Quoted strings with backslash escapes; the match includes the quotes.
double_quoted_string = r'"[^"\\]*(?:\\.[^"\\]*)*"'
single_quoted_string = r"'[^'\\]*(?:\\.[^'\\]*)*'"

# Arithmetic and comparison operators; longer alternatives precede their prefixes.
symbol = r'\+|-|\*|%|<=|>=|==|=|<|>|\^|!'
