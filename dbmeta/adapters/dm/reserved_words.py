"""Reserved words of the Dameng (DM) database."""

RESERVED_WORDS = frozenset(
    word.strip().upper()
    for word in (
        "ABSOLUTE", "ALL", "ALTER", "AND", "ANY", "AS", "ASC", "AUDIT", "AUTHORIZATION", "AVG",
        "BEGIN", "BIGDATEDIFF", "BOTH", "CALL", "CASE", "CAST", "CHECK", "CLOSE", "CLUSTER",
        "COALESCE", "COLUMN", "COMMIT", "COMMITWORK", "CONNECT", "CONNECT_BY_ISLEAF",
        "CONNECT_BY_ISCYCLE", "CONNECT_BY_ROOT", "CONSTRAINT", "CONTAINS", "CONVERT", "COUNT",
        "CREATE", "CROSS", "CRYPTO", "CURSOR", "DATABASE", "DATEADD", "DATEDIFF", "DATEPART",
        "DECLARE", "DECODE", "DEFAULT", "DELETE", "DELETING", "DEREF", "DISTINCT", "DROP",
        "ELSE", "ELSEIF", "ELSIF", "END", "EXCEPTION", "EXEC", "EXECUTE", "EXISTS", "EXIT",
        "EXPLAIN", "EXTRACT", "EVENTINFO", "FALSE", "FETCH", "FIRST", "FOR", "FOREIGN",
        "FREQUENCE", "FROM", "FULL", "FUNCTION", "GOTO", "GRANT", "GROUP", "HAVING", "HEXTORAW",
        "IDENTITY", "IF", "IFNULL", "IMMEDIATE", "INCREASE", "INDEX", "INNER", "INSERT",
        "INSERTING", "INTERVAL", "INTO", "ISNULL", "JOIN", "LAST", "LEADING", "LEFT", "LEVEL",
        "LIMIT", "LINK", "LOGIN", "LOOP", "MAX", "MEMBER", "MIN", "NATURAL", "NEW", "NEXT",
        "NOAUDIT", "NOCYCLE", "NOT", "NOWAIT", "NULL", "NULLIF", "NVL", "OBJECT", "OLD", "ON",
        "ONLINE", "OPEN", "ORDER", "PACKAGE", "PENDANT", "PERCENT", "POLICY", "PRIMARY", "PRINT",
        "PRIOR", "PROCEDURE", "RAISE", "RANGE", "RAWTOHEX", "REF", "REFERENCES", "REFERENCING",
        "RELATIVE", "REPEAT", "REPLACE", "RETURN", "RETURNING", "REVERSE", "REVOKE", "RIGHT",
        "ROLE", "ROLLBACK", "ROW", "ROWNUM", "SAVEPOINT", "SCHEMA", "SELECT", "SEQUENCE", "SET",
        "SOME", "SQL", "SUBSTRING", "SUM", "SYS_CONNECT_BY_PATH", "SYNONYM", "TABLE",
        "TIMESTAMPADD", "TIMESTAMPDIFF", "TOP", "TRAILING", "TRIGGER", "TRIM", "TRUE", "TRUNCATE",
        "UNIQUE", "UNTIL", "UPDATE", "UPDATING", "USER", "USING", "VALUES", "VARIANCE", "VIEW",
        "VSIZE", "WHEN", "WHERE", "WHILE", "WITH",
    )
)
