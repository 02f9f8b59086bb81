from gptclient.files import File, FileRequest, FilesList


def test_file_from_dict():
    data = {
        "bytes": 140,
        "created_at": 1613779121,
        "id": "file-abc",
        "filename": "mydata.jsonl",
        "object": "file",
        "owner": "me",
        "purpose": "fine-tune",
    }
    assert File.from_dict(data) == File(
        bytes=140,
        created_at=1613779121,
        id="file-abc",
        filename="mydata.jsonl",
        object="file",
        owner="me",
        purpose="fine-tune",
    )


def test_file_from_empty_dict():
    assert File.from_dict({}) == File()


def test_files_list_reads_data_key():
    data = {"data": [{"id": "file-1"}, {"id": "file-2"}]}
    assert [f.id for f in FilesList.from_dict(data).files] == ["file-1", "file-2"]


def test_files_list_empty():
    assert FilesList.from_dict({"data": None}).files == []


def test_file_request_holds_values():
    request = FileRequest(file_name="test.go", file_path="client.go", purpose="fine-tune")
    assert (request.file_name, request.file_path, request.purpose) == (
        "test.go",
        "client.go",
        "fine-tune",
    )