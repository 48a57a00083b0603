"""
Protocol buffer messages for ``blog.proto``.

Instead of committing ``protoc`` output, the file descriptor for
``blog.proto`` is assembled here from ``descriptor_pb2`` and registered
in the default descriptor pool.  The message classes are then built by
the same protobuf builder that generated modules use, so
``blog_pb2.Blog``, ``blog_pb2.CreateBlogRequest`` and friends behave
exactly like their generated counterparts.  ``blog.proto`` is the
source of truth: ``tests/test_protos.py`` compiles it with
``grpc_tools.protoc`` and fails when this module drifts from it.
"""

from google.protobuf import descriptor_pb2
from google.protobuf import descriptor_pool
from google.protobuf import empty_pb2
from google.protobuf.internal import builder as _builder


PROTO_FILE = "blog/blog.proto"
PACKAGE = "blog"

_FieldProto = descriptor_pb2.FieldDescriptorProto

# message name -> ordered (field name, type, message type name) tuples
_MESSAGES = (
    (
        "Blog",
        (
            ("id", _FieldProto.TYPE_STRING, None),
            ("author_id", _FieldProto.TYPE_STRING, None),
            ("title", _FieldProto.TYPE_STRING, None),
            ("content", _FieldProto.TYPE_STRING, None),
        ),
    ),
    ("CreateBlogRequest", (("blog", _FieldProto.TYPE_MESSAGE, ".blog.Blog"),)),
    ("CreateBlogResponse", (("id", _FieldProto.TYPE_STRING, None),)),
    ("ReadBlogRequest", (("id", _FieldProto.TYPE_STRING, None),)),
    ("ReadBlogResponse", (("blog", _FieldProto.TYPE_MESSAGE, ".blog.Blog"),)),
    ("UpdateBlogRequest", (("blog", _FieldProto.TYPE_MESSAGE, ".blog.Blog"),)),
    ("DeleteBlogRequest", (("id", _FieldProto.TYPE_STRING, None),)),
    ("ListBlogResponse", (("blog", _FieldProto.TYPE_MESSAGE, ".blog.Blog"),)),
)

_EMPTY = ".google.protobuf.Empty"

# (method, input type, output type, server streaming)
_METHODS = (
    ("CreateBlog", ".blog.CreateBlogRequest", ".blog.CreateBlogResponse", False),
    ("ReadBlog", ".blog.ReadBlogRequest", ".blog.ReadBlogResponse", False),
    ("UpdateBlog", ".blog.UpdateBlogRequest", _EMPTY, False),
    ("DeleteBlog", ".blog.DeleteBlogRequest", _EMPTY, False),
    ("ListBlog", _EMPTY, ".blog.ListBlogResponse", True),
)


def _json_name(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _file_descriptor_proto() -> descriptor_pb2.FileDescriptorProto:
    """Describe ``blog.proto`` as a ``FileDescriptorProto``."""
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=PROTO_FILE,
        package=PACKAGE,
        syntax="proto3",
    )
    file_proto.dependency.append(empty_pb2.DESCRIPTOR.name)

    for message_name, fields in _MESSAGES:
        message = file_proto.message_type.add(name=message_name)
        for number, (field_name, field_type, type_name) in enumerate(fields, start=1):
            field = message.field.add(
                name=field_name,
                number=number,
                label=_FieldProto.LABEL_OPTIONAL,
                type=field_type,
                json_name=_json_name(field_name),
            )
            if type_name:
                field.type_name = type_name

    service = file_proto.service.add(name="BlogService")
    for method_name, input_type, output_type, server_streaming in _METHODS:
        method = service.method.add(name=method_name, input_type=input_type, output_type=output_type)
        if server_streaming:
            method.server_streaming = True
    return file_proto


DESCRIPTOR = descriptor_pool.Default().AddSerializedFile(
    _file_descriptor_proto().SerializeToString()
)

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, _globals)
