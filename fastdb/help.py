"""Help text printed with no verb and after every error."""

HELP_TEXT = """\
FastDB CLI - flag-oriented front-end for SQLite

Usage:
  fastdb --db <file.db> [command] [options]

Commands:
  create --table <name> fields <definitions>
  insert --table <name> values <values>
  update --table <name> set <field=value> where <condition>
  delete --table <name> where <condition>
  select <*|fields> from <table> [join <t> on <cond>]... [where <cond>]
         [group <expr>] [order <expr>] [limit <n>]
  begin | commit | rollback

Field types:
  --int --string --float --bool --date --blob --text

Field modifiers:
  --pk --ai --notnull --unique --default <value>
  --fk <table(column)|table.column> --ondelete <action> --onupdate <action>

FK actions:
  cascade restrict setnull setdefault noaction

Examples:
  Table with a foreign key and actions:
    fastdb --db app.db create --table clients fields \\
      --int id --pk --ai \\
      --string name --notnull \\
      --int country_id --fk countries(id) --ondelete cascade

  Query with a join:
    fastdb --db app.db select "c.*, p.name" from "clients c" \\
      join "countries p" on "c.country_id = p.id" \\
      where "p.continent='America'"

  Transactions:
    fastdb --db app.db begin
    fastdb --db app.db insert --table sales values "1, 100.50"
    fastdb --db app.db commit
"""
