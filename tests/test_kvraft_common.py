from kvlab import labgob
from kvlab.kvraft.common import Err, GetArgs, GetReply, PutAppendArgs, PutAppendReply


def test_err_values_match_wire_strings():
    assert Err("OK") is Err.OK
    assert Err("ErrNoKey") is Err.NO_KEY
    assert Err("ErrWrongLeader") is Err.WRONG_LEADER
    assert Err("ErrTimeOut") is Err.TIMEOUT


def test_err_round_trip():
    for err in Err:
        assert labgob.loads(labgob.dumps(err)) is err


def test_get_reply_round_trip():
    reply = GetReply(err=Err.NO_KEY, value="v")
    decoded = labgob.loads(labgob.dumps(reply))
    assert decoded == reply
    assert decoded.err is Err.NO_KEY


def test_put_append_args_round_trip():
    args = PutAppendArgs(key="k", value="v", op="Append", msg_id=11, client_id=12)
    assert labgob.loads(labgob.dumps(args)) == args
    get_args = GetArgs(key="k", msg_id=1, client_id=2)
    assert labgob.loads(labgob.dumps(get_args)) == get_args


def test_put_append_reply_round_trip():
    reply = PutAppendReply(err=Err.WRONG_LEADER)
    assert labgob.loads(labgob.dumps(reply)).err is Err.WRONG_LEADER