from kvlab import labgob
from kvlab.kvsrv.common import GetArgs, GetReply, PutAppendArgs, PutAppendReply


def test_put_append_args_round_trip():
    args = PutAppendArgs(key="k", value="v", client_id=42, req_seq_num=7)
    assert labgob.loads(labgob.dumps(args)) == args


def test_get_args_round_trip():
    args = GetArgs(key="key", client_id=5, req_seq_num=3)
    decoded = labgob.loads(labgob.dumps(args))
    assert isinstance(decoded, GetArgs)
    assert decoded == args


def test_replies_default_to_empty_value():
    assert PutAppendReply().value == ""
    assert GetReply().value == ""


def test_reply_round_trip_keeps_value():
    reply = GetReply(value="hello")
    assert labgob.loads(labgob.dumps(reply)).value == "hello"
    put_reply = PutAppendReply(value="old")
    assert labgob.loads(labgob.dumps(put_reply)) == put_reply