# nutrix

Business services for a point-of-sale system, backed by MongoDB.

Records are plain dictionaries; MongoDB's internal `_id` field is stripped
from everything the services return. Failures are raised as exceptions
(`LookupError` for missing records, `ValueError` for bad configuration).

## Modules

- `nutrix.database`: `DatabaseConfig` and `Config` describe where the
  database lives. `Config.mongo_uri()` gives the connection URI of the first
  configured database, `Config.timeout()` gives the server-selection timeout
  in seconds (1000 when `env == "dev"`, otherwise 5). `connect(config)`
  returns a lazily connecting `pymongo` database handle, and
  `new_object_id()` returns a fresh ObjectId as a hex string.
- `nutrix.settings`: `SettingsService` reads and overwrites the single
  settings document (`get_settings()`, `update_settings(settings)`).
- `nutrix.language`: `LanguageService.get_language(lang_code)` scans the JSON
  files in `languages_dir` (by default `assets/core/languages`, relative to
  the working directory) and returns the one whose `code` matches, or `None`.
  Malformed files are logged and skipped.
- `nutrix.notifications`: `WebsocketHub` keeps `Session` objects and topic
  subscriptions. Clients subscribe with `{"type": "subscribe", "topic_name":
  ...}`; `send_to_topic` also reaches subscribers of the `"all"` topic.
  `spawn_notification_service("melody", config)` returns one shared hub per
  process; any other name raises `ValueError`.
- `nutrix.customers`: `CustomersService` with paged listing
  (`GetCustomersParams`), lookup, insert, partial update and delete.
- `nutrix.products`: `RecipeService` for products (recipes): CRUD, paged
  listing with case-insensitive name search (`GetProductsParams`), taking
  units from ready stock (`consume_from_ready`, raising
  `InsufficientReadyError`), and resolving recipe trees with their materials
  and sub-products (`get_recipe_tree`, `fill_recipe_design`).
- `nutrix.categories`: `CategoryService` for menu categories; listings drop
  products whose recipe no longer exists.
- `nutrix.sales`: `SalesService` keeps one sales document per day with its
  orders, total costs and total sales.
- `nutrix.log`: `LogService` reads material consumption logs (paged) and
  finished-order logs.
- `nutrix.order_query`: `GetOrdersParameters` and `build_orders_filter`
  turn listing options into a MongoDB query (`"!state"` excludes a state);
  `choose_queue` and `format_display_id` produce order display ids such as
  `"A-1"`.
- `nutrix.background`: `check_expiration_dates(database,
  notification_service)` warns on the `"expire_soon"` topic about material
  entries expiring within two weeks and returns the warnings.

## Installation

```
pip install .
```

## Example

```python
from nutrix.database import Config, DatabaseConfig, connect
from nutrix.products import GetProductsParams, RecipeService

config = Config(databases=[DatabaseConfig(host="localhost", port=27017, database="nutrix")])
database = connect(config)

products, total = RecipeService(database).get_products(
    GetProductsParams(page_number=1, page_size=20, search="pizza")
)
```

## What this package does not do

- It has no service that runs the order lifecycle (submitting, starting,
  finishing or cancelling orders); `nutrix.order_query` only builds the
  queries and display ids such a service needs.
- It does not manage inventory materials or their purchase entries, deduct
  materials when orders are made, or compute how many of a recipe can still
  be made.
- It does not print receipts.
- It contains no web server or websocket transport: `WebsocketHub` routes
  messages to whatever `Session` senders it is given.
- It provides no command-line program and does not seed the database.