# FlatBuffers table accessors for:
#
#   table ResourceHashMessage {
#     timestamp:long;
#     digest:string;
#     hash:string;
#     keywords:string;
#     metadata:string;
#     name:string;
#     type:string;
#   }
#   root_type ResourceHashMessage;

# namespace: schema

import flatbuffers


class ResourceHashMessage(object):
    __slots__ = ['_tab']

    @classmethod
    def GetRootAs(cls, buf, offset=0):
        n = flatbuffers.encode.Get(flatbuffers.packer.uoffset, buf, offset)
        x = ResourceHashMessage()
        x.Init(buf, n + offset)
        return x

    @classmethod
    def GetRootAsResourceHashMessage(cls, buf, offset=0):
        return cls.GetRootAs(buf, offset)

    # ResourceHashMessage
    def Init(self, buf, pos):
        self._tab = flatbuffers.table.Table(buf, pos)

    # ResourceHashMessage
    def Timestamp(self):
        o = flatbuffers.number_types.UOffsetTFlags.py_type(self._tab.Offset(4))
        if o != 0:
            return self._tab.Get(flatbuffers.number_types.Int64Flags, o + self._tab.Pos)
        return 0

    def _string(self, vtable_offset):
        o = flatbuffers.number_types.UOffsetTFlags.py_type(self._tab.Offset(vtable_offset))
        if o != 0:
            return self._tab.String(o + self._tab.Pos)
        return None

    # ResourceHashMessage
    def Digest(self):
        return self._string(6)

    # ResourceHashMessage
    def Hash(self):
        return self._string(8)

    # ResourceHashMessage
    def Keywords(self):
        return self._string(10)

    # ResourceHashMessage
    def Metadata(self):
        return self._string(12)

    # ResourceHashMessage
    def Name(self):
        return self._string(14)

    # ResourceHashMessage
    def Type(self):
        return self._string(16)


def ResourceHashMessageStart(builder):
    builder.StartObject(7)


def ResourceHashMessageAddTimestamp(builder, timestamp):
    builder.PrependInt64Slot(0, timestamp, 0)


def ResourceHashMessageAddDigest(builder, digest):
    builder.PrependUOffsetTRelativeSlot(1, flatbuffers.number_types.UOffsetTFlags.py_type(digest), 0)


def ResourceHashMessageAddHash(builder, hash):
    builder.PrependUOffsetTRelativeSlot(2, flatbuffers.number_types.UOffsetTFlags.py_type(hash), 0)


def ResourceHashMessageAddKeywords(builder, keywords):
    builder.PrependUOffsetTRelativeSlot(3, flatbuffers.number_types.UOffsetTFlags.py_type(keywords), 0)


def ResourceHashMessageAddMetadata(builder, metadata):
    builder.PrependUOffsetTRelativeSlot(4, flatbuffers.number_types.UOffsetTFlags.py_type(metadata), 0)


def ResourceHashMessageAddName(builder, name):
    builder.PrependUOffsetTRelativeSlot(5, flatbuffers.number_types.UOffsetTFlags.py_type(name), 0)


def ResourceHashMessageAddType(builder, type):
    builder.PrependUOffsetTRelativeSlot(6, flatbuffers.number_types.UOffsetTFlags.py_type(type), 0)


def ResourceHashMessageEnd(builder):
    return builder.EndObject()
