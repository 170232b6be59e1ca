"""End-to-end tests: RestClient + interceptor chain + metrics."""

import httpx
import pytest

from restmetrics.http import InterceptingTransport, RestClient
from restmetrics.instrumentation import (
    CapturingUriTemplateHandler,
    MetricsClientHttpInterceptor,
    MetricsRestClientCustomizer,
    route_templates,
)

TIMER = "http.client.requests"
BASE_URL = "https://example.com"


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path.startswith("/missing"):
        return httpx.Response(404)
    if request.url.path.startswith("/broken"):
        return httpx.Response(503)
    return httpx.Response(200, text="OK", headers={"Content-Type": "text/plain"})


@pytest.fixture
def transport():
    return httpx.MockTransport(_handler)


@pytest.fixture
def interceptor(fake_registry):
    return MetricsClientHttpInterceptor(fake_registry)


@pytest.fixture
def client(transport):
    with RestClient(BASE_URL, transport=transport) as c:
        yield c


@pytest.fixture(autouse=True)
def _route_stack_is_clean():
    yield
    assert route_templates.depth() == 0
    assert not route_templates.allocated


class RecordingInterceptor:
    def __init__(self, name: str, log: list[str]) -> None:
        self.name = name
        self.log = log

    def intercept(self, request, body, execution):
        self.log.append(f"{self.name}:before")
        response = execution.execute(request, body)
        self.log.append(f"{self.name}:after")
        return response


# ---------------------------------------------------------------------------
# Without route capture
# ---------------------------------------------------------------------------


class TestWithoutRouteCapture:
    """Interceptor added directly; the uri tag cannot be resolved."""

    def test_metrics_for_templated_get(self, client, interceptor, fake_registry):
        client.interceptors.insert(0, interceptor)

        response = client.execute(
            "GET", "https://example.com/hotels/{hotel}/bookings/{booking}", "42", "21"
        )

        assert response.status_code == 200
        assert response.request.url == "https://example.com/hotels/42/bookings/21"
        assert (
            fake_registry.count(
                TIMER,
                method="GET",
                uri="UNKNOWN",
                exception="None",
                status="200",
                outcome="SUCCESS",
            )
            == 1
        )


# ---------------------------------------------------------------------------
# With the customizer
# ---------------------------------------------------------------------------


class TestWithCustomizer:
    """Customizer installs route capture and the interceptor."""

    def test_uri_tag_is_route_template(self, client, interceptor, fake_registry):
        MetricsRestClientCustomizer(interceptor).customize(client)

        response = client.get("/hotels/{hotel}/bookings/{booking}", 42, 21)

        assert response.text == "OK"
        assert fake_registry.count(TIMER, uri="/hotels/{hotel}/bookings/{booking}", status="200") == 1

    def test_uri_tag_gets_leading_slash(self, client, interceptor, fake_registry):
        MetricsRestClientCustomizer(interceptor).customize(client)

        client.get("test/{id}", 123)

        assert fake_registry.count(TIMER, uri="/test/{id}") == 1

    def test_plain_url_is_not_templated(self, client, interceptor, fake_registry):
        MetricsRestClientCustomizer(interceptor).customize(client)

        client.get(httpx.URL("https://example.com/test/123"))

        assert fake_registry.count(TIMER, uri="UNKNOWN") == 1

    def test_customize_is_idempotent(self, client, interceptor):
        customizer = MetricsRestClientCustomizer(interceptor)

        customizer.customize(client)
        customizer.customize(client)

        assert client.interceptors == [interceptor]
        assert isinstance(client.uri_template_handler, CapturingUriTemplateHandler)
        assert not isinstance(client.uri_template_handler.delegate, CapturingUriTemplateHandler)

    def test_interceptor_goes_first(self, client, interceptor):
        log: list[str] = []
        existing = RecordingInterceptor("existing", log)
        client.interceptors.append(existing)

        MetricsRestClientCustomizer(interceptor).customize(client)

        assert client.interceptors == [interceptor, existing]

    @pytest.mark.parametrize(
        "path,status,outcome",
        [("/missing/{id}", "404", "CLIENT_ERROR"), ("/broken/{id}", "503", "SERVER_ERROR")],
    )
    def test_error_statuses_are_tagged(self, client, interceptor, fake_registry, path, status, outcome):
        MetricsRestClientCustomizer(interceptor).customize(client)

        response = client.get(path, 1)

        assert response.status_code == int(status)
        assert fake_registry.count(TIMER, uri=path, status=status, outcome=outcome) == 1

    def test_transport_failure_propagates_and_is_recorded(self, interceptor, fake_registry):
        error = httpx.ConnectError("connection refused")

        def refuse(request):
            raise error

        with RestClient(BASE_URL, transport=httpx.MockTransport(refuse)) as client:
            MetricsRestClientCustomizer(interceptor).customize(client)
            with pytest.raises(httpx.ConnectError) as exc_info:
                client.get("/hotels/{hotel}", 42)

        assert exc_info.value is error
        assert (
            fake_registry.count(
                TIMER,
                uri="/hotels/{hotel}",
                status="CLIENT_ERROR",
                outcome="UNKNOWN",
                exception="ConnectError",
            )
            == 1
        )

    def test_expansion_failure_leaves_no_route_behind(self, client, interceptor, fake_registry):
        MetricsRestClientCustomizer(interceptor).customize(client)

        with pytest.raises(ValueError):
            client.get("/hotels/{hotel}")

        assert fake_registry.timers == []

    def test_nested_request(self, transport, interceptor, fake_registry):
        customizer = MetricsRestClientCustomizer(interceptor)

        with RestClient(BASE_URL, transport=transport) as nested_client:
            customizer.customize(nested_client)

            class NestedInterceptor:
                def intercept(self, request, body, execution):
                    nested_client.get("/nestedTest/{nestedId}", 124)
                    return execution.execute(request, body)

            with RestClient(BASE_URL, transport=transport) as client:
                customizer.customize(client)
                client.interceptors.append(NestedInterceptor())

                client.get("/test/{id}", 123)

        assert fake_registry.count(TIMER, uri="/test/{id}") == 1
        assert fake_registry.count(TIMER, uri="/nestedTest/{nestedId}") == 1


# ---------------------------------------------------------------------------
# Interceptor chain
# ---------------------------------------------------------------------------


class TestInterceptorChain:
    """InterceptingTransport behaviour independent of metrics."""

    def test_interceptors_run_in_order(self, client):
        log: list[str] = []
        client.interceptors.extend([RecordingInterceptor("a", log), RecordingInterceptor("b", log)])

        client.get("/x")

        assert log == ["a:before", "b:before", "b:after", "a:after"]

    def test_no_interceptors_sends_directly(self, client):
        assert client.get("/x").status_code == 200

    def test_interceptor_receives_body(self, client):
        seen = []

        class BodySpy:
            def intercept(self, request, body, execution):
                seen.append(body)
                return execution.execute(request, body)

        client.interceptors.append(BodySpy())
        client.post("/items", content=b'{"a": 1}')

        assert seen == [b'{"a": 1}']

    def test_interceptor_can_replace_body(self):
        received = []

        def echo(request):
            received.append((request.content, request.headers["content-length"]))
            return httpx.Response(200)

        class Rewriter:
            def intercept(self, request, body, execution):
                return execution.execute(request, b"rewritten")

        with RestClient(BASE_URL, transport=httpx.MockTransport(echo)) as client:
            client.interceptors.append(Rewriter())
            client.post("/items", content=b"original-body")

        assert received == [(b"rewritten", "9")]

    def test_close_closes_wrapped_transport(self):
        closed = []

        class TrackingTransport(httpx.MockTransport):
            def close(self):
                closed.append(True)

        transport = InterceptingTransport(TrackingTransport(_handler))
        transport.close()

        assert closed == [True]
