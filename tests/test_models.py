import pytest
from pydantic import ValidationError

from openai_api import Model, Response


def test_search_reply():
    response = Response.model_validate(
        {
            "data": [
                {"document": 0, "object": "search_result", "score": 215.412},
                {"document": 1, "object": "search_result", "score": 40.316},
            ],
            "object": "list",
        }
    )

    assert [result.document for result in response.data] == [0, 1]
    assert response.data[0].score == pytest.approx(215.412)
    assert response.choices is None


def test_classification_reply():
    response = Response.model_validate(
        {
            "completion": "cmpl-2euN7lUVZ0d4RKbQqRV79IiiE6M1f",
            "label": "Negative",
            "model": "curie:2020-05-03",
            "object": "classification",
            "search_model": "ada",
            "selected_examples": [
                {"document": 1, "label": "Negative", "text": "I am sad."},
                {"document": 0, "label": "Positive", "text": "A happy moment"},
            ],
        }
    )

    assert response.label == "Negative"
    assert response.search_model is Model.ADA
    assert response.selected_examples[0].text == "I am sad."


def test_answer_reply_with_prompt():
    response = Response.model_validate(
        {
            "answers": ["puppy A."],
            "completion": "cmpl-2euVa1kmMb",
            "model": "curie:2020-05-03",
            "object": "answer",
            "prompt": "Please answer the question according to the above context.",
            "search_model": "ada",
            "selected_documents": [
                {"document": 0, "text": "Puppy A is happy. "},
                {"document": 1, "text": "Puppy B is sad. "},
            ],
        }
    )

    assert response.answers == ["puppy A."]
    assert response.selected_documents[1].text == "Puppy B is sad. "
    assert response.prompt.startswith("Please answer")


def test_completion_reply_with_logprobs():
    response = Response.model_validate(
        {
            "object": "text_completion",
            "choices": [
                {
                    "text": " test",
                    "index": 0,
                    "logprobs": {
                        "tokens": [" test"],
                        "token_logprobs": [-0.12],
                        "top_logprobs": [{" test": -0.12, " trial": -2.5}],
                        "text_offset": [18],
                    },
                    "finish_reason": "stop",
                }
            ],
        }
    )

    logprobs = response.choices[0].logprobs
    assert logprobs.tokens == [" test"]
    assert logprobs.top_logprobs[0][" trial"] == -2.5
    assert logprobs.text_offset == [18]


def test_edit_reply_ignores_unknown_fields():
    response = Response.model_validate_json(
        '{"object": "edit", "created": 1649809179, '
        '"choices": [{"text": "What day of the week is it?\\n", "index": 0}], '
        '"unexpected": {"nested": true}}'
    )

    assert response.object == "edit"
    assert response.created == 1649809179
    assert response.choices[0].logprobs is None


def test_unknown_search_model_is_rejected():
    with pytest.raises(ValidationError):
        Response.model_validate({"search_model": "gpt-99"})


def test_response_survives_json_round_trip():
    response = Response.model_validate(
        {
            "id": "cmpl-1",
            "object": "text_completion",
            "created": 1589478378,
            "choices": [
                {
                    "text": " test",
                    "index": 0,
                    "logprobs": {
                        "tokens": [" test"],
                        "token_logprobs": [None],
                        "top_logprobs": None,
                        "text_offset": [0],
                    },
                    "finish_reason": "stop",
                }
            ],
            "search_model": "davinci",
            "selected_documents": [{"document": 0, "text": "Puppy A is happy. "}],
            "usage": {"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2},
        }
    )

    assert Response.model_validate_json(response.model_dump_json()) == response
