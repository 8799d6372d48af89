"""Catalogo de tipos de token del tokenizador de referencia."""
from __future__ import annotations

from enum import IntEnum
from typing import Dict


class TokenKind(IntEnum):
    # Los ids son propios de este paquete; solo los nombres siguen a PHP.
    T_INLINE_HTML = 300
    T_OPEN_TAG = 301
    T_OPEN_TAG_WITH_ECHO = 302
    T_CLOSE_TAG = 303
    T_WHITESPACE = 304
    T_COMMENT = 305
    T_DOC_COMMENT = 306
    T_VARIABLE = 307
    T_STRING = 308
    T_LNUMBER = 309
    T_DNUMBER = 310
    T_CONSTANT_ENCAPSED_STRING = 311
    T_ENCAPSED_AND_WHITESPACE = 312
    T_START_HEREDOC = 313
    T_END_HEREDOC = 314
    T_NS_SEPARATOR = 315
    T_BAD_CHARACTER = 316

    # casts
    T_INT_CAST = 320
    T_DOUBLE_CAST = 321
    T_STRING_CAST = 322
    T_ARRAY_CAST = 323
    T_OBJECT_CAST = 324
    T_BOOL_CAST = 325
    T_UNSET_CAST = 326

    # operadores de mas de un caracter
    T_IS_EQUAL = 340
    T_IS_NOT_EQUAL = 341
    T_IS_IDENTICAL = 342
    T_IS_NOT_IDENTICAL = 343
    T_IS_SMALLER_OR_EQUAL = 344
    T_IS_GREATER_OR_EQUAL = 345
    T_SPACESHIP = 346
    T_BOOLEAN_AND = 347
    T_BOOLEAN_OR = 348
    T_INC = 349
    T_DEC = 350
    T_OBJECT_OPERATOR = 351
    T_NULLSAFE_OBJECT_OPERATOR = 352
    T_DOUBLE_ARROW = 353
    T_PAAMAYIM_NEKUDOTAYIM = 354
    T_PLUS_EQUAL = 355
    T_MINUS_EQUAL = 356
    T_MUL_EQUAL = 357
    T_DIV_EQUAL = 358
    T_CONCAT_EQUAL = 359
    T_MOD_EQUAL = 360
    T_POW = 361
    T_POW_EQUAL = 362
    T_COALESCE = 363
    T_COALESCE_EQUAL = 364
    T_SL = 365
    T_SR = 366
    T_SL_EQUAL = 367
    T_SR_EQUAL = 368
    T_AND_EQUAL = 369
    T_OR_EQUAL = 370
    T_XOR_EQUAL = 371
    T_ELLIPSIS = 372

    # palabras clave
    T_ABSTRACT = 400
    T_LOGICAL_AND = 401
    T_ARRAY = 402
    T_AS = 403
    T_BREAK = 404
    T_CALLABLE = 405
    T_CASE = 406
    T_CATCH = 407
    T_CLASS = 408
    T_CLONE = 409
    T_CONST = 410
    T_CONTINUE = 411
    T_DECLARE = 412
    T_DEFAULT = 413
    T_DO = 414
    T_ECHO = 415
    T_ELSE = 416
    T_ELSEIF = 417
    T_EMPTY = 418
    T_ENDDECLARE = 419
    T_ENDFOR = 420
    T_ENDFOREACH = 421
    T_ENDIF = 422
    T_ENDSWITCH = 423
    T_ENDWHILE = 424
    T_EVAL = 425
    T_EXIT = 426
    T_EXTENDS = 427
    T_FINAL = 428
    T_FINALLY = 429
    T_FN = 430
    T_FOR = 431
    T_FOREACH = 432
    T_FUNCTION = 433
    T_GLOBAL = 434
    T_GOTO = 435
    T_IF = 436
    T_IMPLEMENTS = 437
    T_INCLUDE = 438
    T_INCLUDE_ONCE = 439
    T_INSTANCEOF = 440
    T_INSTEADOF = 441
    T_INTERFACE = 442
    T_ISSET = 443
    T_LIST = 444
    T_MATCH = 445
    T_NAMESPACE = 446
    T_NEW = 447
    T_LOGICAL_OR = 448
    T_PRINT = 449
    T_PRIVATE = 450
    T_PROTECTED = 451
    T_PUBLIC = 452
    T_REQUIRE = 453
    T_REQUIRE_ONCE = 454
    T_RETURN = 455
    T_STATIC = 456
    T_SWITCH = 457
    T_THROW = 458
    T_TRAIT = 459
    T_TRY = 460
    T_UNSET = 461
    T_USE = 462
    T_VAR = 463
    T_WHILE = 464
    T_LOGICAL_XOR = 465
    T_YIELD = 466


KEYWORDS: Dict[str, TokenKind] = {
    "abstract": TokenKind.T_ABSTRACT,
    "and": TokenKind.T_LOGICAL_AND,
    "array": TokenKind.T_ARRAY,
    "as": TokenKind.T_AS,
    "break": TokenKind.T_BREAK,
    "callable": TokenKind.T_CALLABLE,
    "case": TokenKind.T_CASE,
    "catch": TokenKind.T_CATCH,
    "class": TokenKind.T_CLASS,
    "clone": TokenKind.T_CLONE,
    "const": TokenKind.T_CONST,
    "continue": TokenKind.T_CONTINUE,
    "declare": TokenKind.T_DECLARE,
    "default": TokenKind.T_DEFAULT,
    "die": TokenKind.T_EXIT,
    "do": TokenKind.T_DO,
    "echo": TokenKind.T_ECHO,
    "else": TokenKind.T_ELSE,
    "elseif": TokenKind.T_ELSEIF,
    "empty": TokenKind.T_EMPTY,
    "enddeclare": TokenKind.T_ENDDECLARE,
    "endfor": TokenKind.T_ENDFOR,
    "endforeach": TokenKind.T_ENDFOREACH,
    "endif": TokenKind.T_ENDIF,
    "endswitch": TokenKind.T_ENDSWITCH,
    "endwhile": TokenKind.T_ENDWHILE,
    "eval": TokenKind.T_EVAL,
    "exit": TokenKind.T_EXIT,
    "extends": TokenKind.T_EXTENDS,
    "final": TokenKind.T_FINAL,
    "finally": TokenKind.T_FINALLY,
    "fn": TokenKind.T_FN,
    "for": TokenKind.T_FOR,
    "foreach": TokenKind.T_FOREACH,
    "function": TokenKind.T_FUNCTION,
    "global": TokenKind.T_GLOBAL,
    "goto": TokenKind.T_GOTO,
    "if": TokenKind.T_IF,
    "implements": TokenKind.T_IMPLEMENTS,
    "include": TokenKind.T_INCLUDE,
    "include_once": TokenKind.T_INCLUDE_ONCE,
    "instanceof": TokenKind.T_INSTANCEOF,
    "insteadof": TokenKind.T_INSTEADOF,
    "interface": TokenKind.T_INTERFACE,
    "isset": TokenKind.T_ISSET,
    "list": TokenKind.T_LIST,
    "match": TokenKind.T_MATCH,
    "namespace": TokenKind.T_NAMESPACE,
    "new": TokenKind.T_NEW,
    "or": TokenKind.T_LOGICAL_OR,
    "print": TokenKind.T_PRINT,
    "private": TokenKind.T_PRIVATE,
    "protected": TokenKind.T_PROTECTED,
    "public": TokenKind.T_PUBLIC,
    "require": TokenKind.T_REQUIRE,
    "require_once": TokenKind.T_REQUIRE_ONCE,
    "return": TokenKind.T_RETURN,
    "static": TokenKind.T_STATIC,
    "switch": TokenKind.T_SWITCH,
    "throw": TokenKind.T_THROW,
    "trait": TokenKind.T_TRAIT,
    "try": TokenKind.T_TRY,
    "unset": TokenKind.T_UNSET,
    "use": TokenKind.T_USE,
    "var": TokenKind.T_VAR,
    "while": TokenKind.T_WHILE,
    "xor": TokenKind.T_LOGICAL_XOR,
    "yield": TokenKind.T_YIELD,
}

# orden de mayor a menor longitud para que la alternancia no corte operadores
OPERATORS: Dict[str, TokenKind] = {
    "<=>": TokenKind.T_SPACESHIP,
    "**=": TokenKind.T_POW_EQUAL,
    "...": TokenKind.T_ELLIPSIS,
    "<<=": TokenKind.T_SL_EQUAL,
    ">>=": TokenKind.T_SR_EQUAL,
    "===": TokenKind.T_IS_IDENTICAL,
    "!==": TokenKind.T_IS_NOT_IDENTICAL,
    "??=": TokenKind.T_COALESCE_EQUAL,
    "?->": TokenKind.T_NULLSAFE_OBJECT_OPERATOR,
    "==": TokenKind.T_IS_EQUAL,
    "!=": TokenKind.T_IS_NOT_EQUAL,
    "<>": TokenKind.T_IS_NOT_EQUAL,
    "<=": TokenKind.T_IS_SMALLER_OR_EQUAL,
    ">=": TokenKind.T_IS_GREATER_OR_EQUAL,
    "&&": TokenKind.T_BOOLEAN_AND,
    "||": TokenKind.T_BOOLEAN_OR,
    "++": TokenKind.T_INC,
    "--": TokenKind.T_DEC,
    "->": TokenKind.T_OBJECT_OPERATOR,
    "=>": TokenKind.T_DOUBLE_ARROW,
    "::": TokenKind.T_PAAMAYIM_NEKUDOTAYIM,
    "+=": TokenKind.T_PLUS_EQUAL,
    "-=": TokenKind.T_MINUS_EQUAL,
    "*=": TokenKind.T_MUL_EQUAL,
    "/=": TokenKind.T_DIV_EQUAL,
    ".=": TokenKind.T_CONCAT_EQUAL,
    "%=": TokenKind.T_MOD_EQUAL,
    "&=": TokenKind.T_AND_EQUAL,
    "|=": TokenKind.T_OR_EQUAL,
    "^=": TokenKind.T_XOR_EQUAL,
    "**": TokenKind.T_POW,
    "??": TokenKind.T_COALESCE,
    "<<": TokenKind.T_SL,
    ">>": TokenKind.T_SR,
}

CASTS: Dict[str, TokenKind] = {
    "integer": TokenKind.T_INT_CAST,
    "int": TokenKind.T_INT_CAST,
    "boolean": TokenKind.T_BOOL_CAST,
    "bool": TokenKind.T_BOOL_CAST,
    "double": TokenKind.T_DOUBLE_CAST,
    "float": TokenKind.T_DOUBLE_CAST,
    "real": TokenKind.T_DOUBLE_CAST,
    "string": TokenKind.T_STRING_CAST,
    "binary": TokenKind.T_STRING_CAST,
    "array": TokenKind.T_ARRAY_CAST,
    "object": TokenKind.T_OBJECT_CAST,
    "unset": TokenKind.T_UNSET_CAST,
}


def token_name(kind: int) -> str:
    """Equivalente a ``token_name`` de PHP: ``UNKNOWN`` para ids ajenos."""
    try:
        return TokenKind(kind).name
    except ValueError:
        return "UNKNOWN"
