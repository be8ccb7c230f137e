"""Source templates for the generated router module.

Rendered with kida (autoescape off: the output is JavaScript, not HTML).
The module always exports ``AppRouter`` (default and named), ``router``
and ``routes``, whether or not any route exists.
"""

ROUTER_MODULE = """\
{% for statement in imports %}
{{ statement }}
{% end %}

const routes = {{ routes }};

const router = createBrowserRouter(routes);

export function AppRouter() {
  return createElement(RouterProvider, { router: router });
}

export { router, routes };
export default AppRouter;
"""

EMPTY_IMPORTS = (
    "import { createElement } from 'react';",
    "import { createBrowserRouter, RouterProvider } from 'react-router-dom';",
)
