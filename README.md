# okeyshell

okeyshell is a small interactive shell front end. It reads command lines,
spaces out operators, splits each line into words, classifies the words
as tokens and builds a syntax tree. It then prints that tree so you can
see how the line was understood.

## Installation

```
pip install .
```

## Running the shell

```
okeyshell
```

The shell prints a welcome banner and then a prompt made from the current
directory. For every non-empty line it prints the line with spaces added
around the operators, then, when the line forms a valid tree, the command
you entered and a view of its syntax tree:

```
/home/me > ls -l|grep test&&echo ok
mod_line: ls -l | grep test && echo ok

Command entered: ls -l|grep test&&echo ok

=== AST DEBUG VIEW ===
├── AND
    ├── PIPE
        ├── CMD [ ls -l ]
        ├── CMD [ grep test ]
    ├── CMD [ echo ok ]
====================
```

End the session with end-of-file (Ctrl-D). The shell cleans up and prints
`Cleand up and Goodbye!`.

If the shell cannot start (for example, the working directory cannot be
read or the environment is empty), it prints a line beginning with
`Error: ` to standard error and exits with a non-zero status.

## Grammar

From the loosest binding to the tightest:

- `&&` and `||`, read left to right
- `|`, read left to right
- `( ... )` to group, or a plain command made of one or more words

A line that does not fit this grammar gives no tree. Parsing stops at the
first token that cannot continue the expression, and the rest of the line
is ignored.

## What it does not do

- Commands are parsed and shown, never run. There is no execution,
  no builtins, no variable expansion and no quoting.
- The words `<` and `>` are recognised as tokens, but the parser does not
  accept them, so a line with a redirection gives no tree.
- Entered lines are kept in memory in `Shell.history` for the session
  only. Nothing is written to a history file.

## Using the library

```python
from okeyshell.syntax_tree import parse_line
from okeyshell.printer import format_ast

tree = parse_line("(a || b) | c")
print(format_ast(tree, 0), end="")
```

prints

```
├── PIPE
    ├── OR
        ├── CMD [ a ]
        ├── CMD [ b ]
    ├── CMD [ c ]
```

A session can also be driven from code. `Shell(environ, cwd, out)` takes
an environment (a mapping or `KEY=VALUE` strings), a working directory and
an output stream; `Shell.handle_line(line)` parses one line and returns its
tree, and `Shell.run(lines)` handles a sequence of lines, cleans up and
returns the exit status.

Other modules cover the pieces that the shell is built from:

- `okeyshell.transform`: `transform_line` and `transformed_length`
- `okeyshell.tokens`: `TokenType`, `token_type`, `tokenize`, `split_words`
- `okeyshell.syntax_tree`: `AstNode`, `Parser`, `build_ast`, `parse_line`
- `okeyshell.printer`: `token_name`, `format_ast`, `debug_view`,
  `print_ast`, `debug_ast`, `demo_ast_construction`
- `okeyshell.shell`: `Shell`, `welcome_banner`, `print_welcome`, `main`
- `okeyshell.env`: `EnvEntry`, `parse_env_entry`, `env_init`
- `okeyshell.errors`: `ShellError`, `error_handler`, `format_error`
- `okeyshell.collector`: `GarbageCollector`, a registry that tracks the
  buffers and strings the shell hands out and raises `DoubleFreeError`
  when an untracked object is freed; `garbage_holder()` returns a shared
  instance
- `okeyshell.line_reader`: `LineReader`, which reads a text or binary
  stream line by line through a fixed-size buffer
- `okeyshell.strings`, `okeyshell.memory`, `okeyshell.numbers`,
  `okeyshell.charclass`, `okeyshell.linked_list`, `okeyshell.output`:
  low-level string, buffer, number, character, list and output helpers

## Running the tests

```
pip install ".[test]"
pytest
```