#!/usr/bin/env python3
"""
The argument matcher.

Resolves a declared signature of slots against a list of argument texts,
parses each bound argument as its slot's type, and only if every one succeeds,
stores them all.

eg:
  matcher = ConfArgMatcher()
  count, limit, ttl = Box(), Box(), Box()
  matcher.parse_string("5, 6, TTL 7",
                       [SlotSpec.build("int count", dest=count),
                        OPTIONAL,
                        SlotSpec.build("int limit", dest=limit),
                        SlotSpec.build("TTL=byte time to live", dest=ttl)])

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
from dataclasses import dataclass, field
from typing import Iterable

# ##-- end stdlib imports

# ##-- 3rd party imports
import more_itertools as mitz

# ##-- end 3rd party imports

# ##-- 1st party imports
from confparse._abstract.matcher import ArgMatcher_i
from confparse._interface import (ARG_SEPARATOR, ARGNAME, IGNORE_REST_SIG,
                                  KEYWORDS_SIG, REJECT, SPACE_ARGNAME,
                                  SPACE_SEPARATOR, UNKNOWN_TYPE_SIG)
from confparse._structs.slot import MatchResult, Slot
from confparse._structs.slot_spec import SlotSpec
from confparse.control.context import ParseContext
from confparse.enums import KeywordResult_e, SlotKind_e
from confparse.errors import (ArityError, ConfParseError,
                              DuplicateKeywordError, FormatError,
                              SignatureError, SlotParseError,
                              TooManySlotsError, UnknownKeywordError)
from . import tokenizer

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass
class _Signature:
    """ A built signature: its slots, and the counts derived from the markers """

    slots          : list[Slot]           = field(default_factory=list)
    nrequired      : None|int             = None
    npositional    : None|int             = None
    mixed          : bool                 = False
    ignore_rest    : bool                 = False
    supplied       : int                  = 0
    keyword_error  : None|ConfParseError  = None

    @property
    def positional(self) -> list[Slot]:
        return self.slots[:self.npositional]

    @property
    def keywords(self) -> dict[str, Slot]:
        return {x.spec.keyword : x for x in self.slots[self.npositional:]}

class ConfArgMatcher(ArgMatcher_i):
    """
    Match argument texts against a signature, in the stages:
    signature -> binding -> arity -> keywords -> parsing -> storing.

    Failures are reported to the context's error sink, and returned as a failed MatchResult.
    When `strict`, the error is raised instead.
    """

    class _MatchState(enum.Enum):
        POSITIONAL = enum.auto()
        KEYWORD    = enum.auto()

    def __init__(self, *, strict:bool=False):
        self.MS      = ConfArgMatcher._MatchState
        self.strict  = strict

    def parse(self, args:list[str], specs:Iterable[SlotSpec|str|dict], ctx:None|ParseContext=None) -> MatchResult:
        """ Match a pre-split list of arguments """
        return self._run(list(args), specs, ctx, argname=ARGNAME, separator=ARG_SEPARATOR)

    def parse_string(self, conf:str, specs:Iterable[SlotSpec|str|dict], ctx:None|ParseContext=None) -> MatchResult:
        """ Split a configuration string on commas, then match """
        return self._run(tokenizer.split_commas(conf), specs, ctx, argname=ARGNAME, separator=ARG_SEPARATOR)

    def parse_space(self, text:str, specs:Iterable[SlotSpec|str|dict], ctx:None|ParseContext=None) -> MatchResult:
        """ Split an argument on whitespace, then match the words """
        return self._run(tokenizer.split_spaces(text), specs, ctx, argname=SPACE_ARGNAME, separator=SPACE_SEPARATOR)

    def parse_keyword(self, text:str, specs:Iterable[SlotSpec|str|dict], ctx:None|ParseContext=None) -> MatchResult:
        """ Match a single argument against keyword slots only.
          Unknown keywords and stray text are ignored.
        """
        return self._run([text], specs, ctx, argname=ARGNAME, separator=ARG_SEPARATOR, keywords_only=True)

    def _run(self, args:list[str], specs:Iterable, ctx:None|ParseContext, *, argname:str, separator:str, keywords_only:bool=False) -> MatchResult:
        ctx        = ctx or ParseContext()
        nerrors_in = ctx.errh.nerrors
        logging.debug("Matching %s args: %s", argname, args)
        try:
            sig    = self._build_signature(specs, ctx, argname=argname, keywords_only=keywords_only)
            self._bind(args, sig, ctx, argname=argname, keywords_only=keywords_only)
            self._check_arity(sig, argname=argname, separator=separator)
            self._check_keywords(sig)
            self._parse_slots(sig, ctx, nerrors_in)
            return self._store_slots(sig, ctx)
        except SlotParseError as err:
            return self._fail(err, err.errors, ctx, reported=True)
        except ConfParseError as err:
            return self._fail(err, [str(err)], ctx)

    def _fail(self, err:ConfParseError, errors:list[str], ctx:ParseContext, *, reported:bool=False) -> MatchResult:
        if not reported:
            for msg in errors:
                ctx.errh.error("%s", msg)

        if self.strict:
            raise err

        return MatchResult.failed(err, errors)

    def _build_signature(self, specs:Iterable, ctx:ParseContext, *, argname:str, keywords_only:bool) -> _Signature:
        """ Look up each slot's type, and derive the required and positional counts.
          A keyword slot with no keywords marker before it starts a mixed keyword section.
        """
        sig = _Signature()
        if keywords_only:
            sig.nrequired   = 0
            sig.npositional = 0
            sig.ignore_rest = True

        max_slots = ctx.max_slots
        for spec in SlotSpec.build_signature(specs):
            argtype = ctx.registry.lookup(spec.type)
            kind    = spec.kind if argtype.kind is SlotKind_e.POSITIONAL else argtype.kind
            match kind:
                case SlotKind_e.OPTIONAL:
                    sig.nrequired = len(sig.slots) if sig.nrequired is None else sig.nrequired
                    continue
                case SlotKind_e.UNMIXED_KEYWORDS | SlotKind_e.MIXED_KEYWORDS:
                    sig.nrequired   = len(sig.slots) if sig.nrequired is None else sig.nrequired
                    sig.npositional = len(sig.slots) if sig.npositional is None else sig.npositional
                    sig.mixed       = kind is SlotKind_e.MIXED_KEYWORDS
                    continue
                case SlotKind_e.IGNORE_REST:
                    sig.nrequired   = len(sig.slots) if sig.nrequired is None else sig.nrequired
                    sig.ignore_rest = True
                    break
                case SlotKind_e.KEYWORD if sig.npositional is None:
                    sig.nrequired   = len(sig.slots) if sig.nrequired is None else sig.nrequired
                    sig.npositional = len(sig.slots)
                    sig.mixed       = True
                case SlotKind_e.KEYWORD:
                    pass
                case _ if sig.npositional is not None:
                    raise SignatureError("slot `%s' (%s) comes after keywords, but has no keyword", spec, spec.desc)
                case _:
                    pass

            if len(sig.slots) >= max_slots:
                raise TooManySlotsError("too many slots for the matcher (max %s)", max_slots)
            if argtype.takes_extra and spec.extra is None:
                raise SignatureError("slot `%s' (%s) needs an extra parameter", spec, spec.desc)

            match spec.keyword:
                case None:
                    label = f"{argname} {len(sig.slots) + 1}"
                case str() as kw:
                    label = f"keyword {kw}"

            sig.slots.append(Slot(spec=spec, argtype=argtype, label=label))

        sig.nrequired   = len(sig.slots) if sig.nrequired is None else sig.nrequired
        sig.npositional = len(sig.slots) if sig.npositional is None else sig.npositional
        sig.nrequired   = min(sig.nrequired, sig.npositional)
        return sig

    def _bind(self, args:list[str], sig:_Signature, ctx:ParseContext, *, argname:str, keywords_only:bool) -> None:
        """ Assign each argument to a positional or keyword slot.
          Bad keywords are collected, and raised together.
        """
        positional     = sig.positional
        keywords       = sig.keywords
        supplied       = 0
        bad            = []
        any_unknown    = False
        tokens         = mitz.peekable(enumerate(args))
        for idx, token in tokens:
            state = self.MS.KEYWORD if supplied >= sig.npositional else self.MS.POSITIONAL
            if state is self.MS.POSITIONAL and not sig.mixed:
                positional[supplied].bind(token)
                supplied += 1
                continue

            result, kw = self._assign_keyword(token, tokens, keywords, ctx)
            match state, result:
                case _, KeywordResult_e.DUPLICATE:
                    bad.append(f"{kw} (duplicate keyword)")
                case self.MS.POSITIONAL, KeywordResult_e.SUCCESS:
                    pass
                case self.MS.POSITIONAL, _:
                    positional[supplied].bind(token)
                    supplied += 1
                case self.MS.KEYWORD, KeywordResult_e.SUCCESS:
                    pass
                case self.MS.KEYWORD, _ if sig.ignore_rest:
                    pass
                case self.MS.KEYWORD, KeywordResult_e.NO_KEYWORD:
                    # a surplus positional, the arity check reports it
                    bad.append(f"<{argname} {idx + 1}>")
                    supplied += 1
                case self.MS.KEYWORD, KeywordResult_e.UNKNOWN:
                    bad.append(kw)
                    any_unknown = True

        sig.supplied = supplied
        if keywords_only or not bool(bad):
            return

        valid = list(keywords.keys())
        msg   = "bad keyword(s) %s\n(valid keywords are %s)"
        match any_unknown:
            case True:
                sig.keyword_error = UnknownKeywordError(msg, ", ".join(bad), ", ".join(valid), bad=bad, valid=valid)
            case False:
                sig.keyword_error = DuplicateKeywordError(msg, ", ".join(bad), ", ".join(valid), bad=bad, valid=valid)

    def _assign_keyword(self, token:str, tokens:mitz.peekable, keywords:dict[str, Slot], ctx:ParseContext) -> tuple[KeywordResult_e, None|str]:
        """ Try to bind a token as `KEYWORD value`.
          A token that is exactly a declared keyword takes the next token as its value,
          unless that token is itself a declared keyword, when the keyword is bound with no value.
        """
        try:
            kw, rest = tokenizer.split_keyword(token)
        except FormatError:
            return KeywordResult_e.NO_KEYWORD, None

        match bool(rest):
            case False if kw in keywords and bool(tokens) and not self._is_keyword(tokens.peek()[1], keywords):
                _, rest = next(tokens)
            case False if kw in keywords and bool(tokens):
                logging.debug("Keyword %s given without a value", kw)
            case False:
                return KeywordResult_e.NO_KEYWORD, kw
            case True if kw not in keywords:
                return KeywordResult_e.UNKNOWN, kw
            case True:
                pass

        slot = keywords[kw]
        match slot.active, ctx.duplicate_keywords:
            case True, str() as policy if policy == REJECT:
                return KeywordResult_e.DUPLICATE, kw
            case True, _:
                ctx.errh.warning("keyword %s given more than once, using the last value", kw)
            case False, _:
                pass

        slot.bind(rest)
        return KeywordResult_e.SUCCESS, kw

    def _is_keyword(self, token:str, keywords:dict[str, Slot]) -> bool:
        try:
            kw, _ = tokenizer.split_keyword(token)
        except FormatError:
            return False

        return kw in keywords

    def _check_arity(self, sig:_Signature, *, argname:str, separator:str) -> None:
        too_few  = sig.supplied < sig.nrequired
        too_many = sig.supplied > sig.npositional and not sig.ignore_rest
        if not (too_few or too_many):
            return

        signature = self._signature_str(sig, separator)
        whoops    = "too many" if too_many else "too few"
        if not bool(signature):
            raise ArityError("expected empty %s list", argname)

        raise ArityError("%s %ss; expected `%s'", whoops, argname, signature)

    def _check_keywords(self, sig:_Signature) -> None:
        if sig.keyword_error is not None:
            raise sig.keyword_error

    def _signature_str(self, sig:_Signature, separator:str) -> str:
        """ eg: 'int, [int], [keywords]' """
        descs    = [x.argtype.desc or UNKNOWN_TYPE_SIG for x in sig.positional]
        parts    = descs[:sig.nrequired]
        optional = descs[sig.nrequired:]
        rest     = IGNORE_REST_SIG if sig.ignore_rest else ""
        if bool(optional):
            parts.append(f"[{separator.join(optional)}{rest}]")
        elif bool(rest):
            parts.append(rest)

        if sig.npositional < len(sig.slots):
            parts.append(KEYWORDS_SIG)

        return separator.join(parts)

    def _parse_slots(self, sig:_Signature, ctx:ParseContext, nerrors_in:int) -> None:
        """ Parse every bound slot, collecting all the errors """
        errors = []
        for slot in sig.slots:
            if not slot.active:
                continue
            if slot.argtype.parse is None:
                slot.value = slot.token
                continue

            try:
                slot.value = slot.argtype.parse(slot, slot.token, ctx)
            except ConfParseError as err:
                errors.append(str(err))
                ctx.errh.error("%s", str(err))

        # parse functions may also report straight to the sink
        if ctx.errh.nerrors != nerrors_in:
            errors = errors or ctx.errh.messages[nerrors_in:]
            raise SlotParseError("%s", "\n".join(errors), errors=errors)

    def _store_slots(self, sig:_Signature, ctx:ParseContext) -> MatchResult:
        result = MatchResult(count=0)
        for slot in sig.slots:
            if not slot.active:
                continue
            if slot.argtype.store is not None:
                slot.argtype.store(slot, ctx)
            if slot.argtype.kind is not SlotKind_e.IGNORE:
                result.values[slot.spec.keyword or slot.label] = slot.value
            result.count += 1

        logging.debug("Stored %s slots", result.count)
        return result
