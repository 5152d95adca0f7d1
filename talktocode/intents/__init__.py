from talktocode.intents import get, call, find

# Order matters: the first intent whose pattern matches a command wins.
ALL_INTENTS = (
    get.INTENT,
    call.WITH_ARGS,
    call.NO_ARGS,
    find.INTENT,
)
