"""
Index of public JDK classes, by package: all of java.lang and the commonly
used types of other packages.

Stands in for the runtime's own class loader when no JDK is around to ask.
Nested classes use their binary names (Map$Entry).
"""

from typing import Dict, FrozenSet, Iterator

JDK_CLASSES: Dict[str, FrozenSet[str]] = {
    "java.lang": frozenset(
        {
            # Every public type of java.lang in JDK 21, preview APIs excluded
            "AbstractMethodError", "Appendable", "ArithmeticException",
            "ArrayIndexOutOfBoundsException", "ArrayStoreException", "AssertionError",
            "AutoCloseable", "Boolean", "BootstrapMethodError", "Byte", "CharSequence",
            "Character", "Character$Subset", "Character$UnicodeBlock",
            "Character$UnicodeScript", "Class", "ClassCastException",
            "ClassCircularityError", "ClassFormatError", "ClassLoader",
            "ClassNotFoundException", "ClassValue", "CloneNotSupportedException",
            "Cloneable", "Comparable", "Deprecated", "Double", "Enum", "Enum$EnumDesc",
            "EnumConstantNotPresentException", "Error", "Exception",
            "ExceptionInInitializerError", "Float", "FunctionalInterface",
            "IllegalAccessError", "IllegalAccessException", "IllegalArgumentException",
            "IllegalCallerException", "IllegalMonitorStateException",
            "IllegalStateException", "IllegalThreadStateException",
            "IncompatibleClassChangeError", "IndexOutOfBoundsException",
            "InheritableThreadLocal", "InstantiationError", "InstantiationException",
            "Integer", "InternalError", "InterruptedException", "Iterable",
            "LayerInstantiationException", "LinkageError", "Long", "MatchException",
            "Math", "Module", "ModuleLayer", "ModuleLayer$Controller",
            "NegativeArraySizeException", "NoClassDefFoundError", "NoSuchFieldError",
            "NoSuchFieldException", "NoSuchMethodError", "NoSuchMethodException",
            "NullPointerException", "Number", "NumberFormatException", "Object",
            "OutOfMemoryError", "Override", "Package", "Process", "ProcessBuilder",
            "ProcessBuilder$Redirect", "ProcessBuilder$Redirect$Type", "ProcessHandle",
            "ProcessHandle$Info", "Readable", "Record", "ReflectiveOperationException",
            "Runnable", "Runtime", "Runtime$Version", "RuntimeException",
            "RuntimePermission", "SafeVarargs", "SecurityException", "SecurityManager",
            "Short", "StackOverflowError", "StackTraceElement", "StackWalker",
            "StackWalker$Option", "StackWalker$StackFrame", "StrictMath", "String",
            "StringBuffer", "StringBuilder", "StringIndexOutOfBoundsException",
            "SuppressWarnings", "System", "System$Logger", "System$Logger$Level",
            "System$LoggerFinder", "Thread", "Thread$Builder", "Thread$Builder$OfPlatform",
            "Thread$Builder$OfVirtual", "Thread$State", "Thread$UncaughtExceptionHandler",
            "ThreadDeath", "ThreadGroup", "ThreadLocal", "Throwable",
            "TypeNotPresentException", "UnknownError", "UnsatisfiedLinkError",
            "UnsupportedClassVersionError", "UnsupportedOperationException", "VerifyError",
            "VirtualMachineError", "Void", "WrongThreadException",
        }
    ),
    "java.lang.annotation": frozenset(
        {
            "Annotation", "Documented", "ElementType", "Inherited", "Repeatable",
            "Retention", "RetentionPolicy", "Target",
        }
    ),
    "java.lang.reflect": frozenset(
        {
            "AccessibleObject", "Array", "Constructor", "Executable", "Field",
            "GenericArrayType", "InvocationHandler", "InvocationTargetException",
            "Member", "Method", "Modifier", "Parameter", "ParameterizedType", "Proxy",
            "Type", "TypeVariable", "WildcardType",
        }
    ),
    "java.util": frozenset(
        {
            "AbstractCollection", "AbstractList", "AbstractMap", "AbstractMap$SimpleEntry",
            "AbstractMap$SimpleImmutableEntry", "AbstractQueue", "AbstractSet",
            "ArrayDeque", "ArrayList", "Arrays", "Base64", "BitSet", "Calendar",
            "Collection", "Collections", "Comparator", "ConcurrentModificationException",
            "Currency", "Date", "Deque", "Dictionary", "EnumMap", "EnumSet",
            "Enumeration", "EventListener", "EventObject", "Formatter", "GregorianCalendar",
            "HashMap", "HashSet", "Hashtable", "IdentityHashMap", "Iterator",
            "LinkedHashMap", "LinkedHashSet", "LinkedList", "List", "ListIterator",
            "Locale", "Map", "Map$Entry", "MissingResourceException", "NavigableMap",
            "NavigableSet", "NoSuchElementException", "Objects", "Optional",
            "OptionalDouble", "OptionalInt", "OptionalLong", "PriorityQueue",
            "Properties", "Queue", "Random", "RandomAccess", "ResourceBundle",
            "Scanner", "Set", "SortedMap", "SortedSet", "Spliterator", "Spliterators",
            "Stack", "StringJoiner", "StringTokenizer", "Timer", "TimerTask", "TimeZone",
            "TreeMap", "TreeSet", "UUID", "Vector", "WeakHashMap",
        }
    ),
    "java.util.function": frozenset(
        {
            "BiConsumer", "BiFunction", "BiPredicate", "BinaryOperator",
            "BooleanSupplier", "Consumer", "DoubleFunction", "DoubleSupplier",
            "DoubleUnaryOperator", "Function", "IntBinaryOperator", "IntConsumer",
            "IntFunction", "IntPredicate", "IntSupplier", "IntUnaryOperator",
            "LongFunction", "LongSupplier", "Predicate", "Supplier", "ToDoubleFunction",
            "ToIntFunction", "ToLongFunction", "UnaryOperator",
        }
    ),
    "java.util.concurrent": frozenset(
        {
            "BlockingDeque", "BlockingQueue", "Callable", "CancellationException",
            "CompletableFuture", "CompletionException", "CompletionStage",
            "ConcurrentHashMap", "ConcurrentLinkedDeque", "ConcurrentLinkedQueue",
            "ConcurrentMap", "ConcurrentSkipListMap", "ConcurrentSkipListSet",
            "CopyOnWriteArrayList", "CopyOnWriteArraySet", "CountDownLatch",
            "CyclicBarrier", "DelayQueue", "Delayed", "ExecutionException", "Executor",
            "ExecutorService", "Executors", "ForkJoinPool", "ForkJoinTask", "Future",
            "LinkedBlockingDeque", "LinkedBlockingQueue", "Phaser",
            "PriorityBlockingQueue", "RejectedExecutionException",
            "ScheduledExecutorService", "ScheduledFuture", "ScheduledThreadPoolExecutor",
            "Semaphore", "SynchronousQueue", "ThreadFactory", "ThreadLocalRandom",
            "ThreadPoolExecutor", "TimeUnit", "TimeoutException",
        }
    ),
    "java.util.concurrent.atomic": frozenset(
        {
            "AtomicBoolean", "AtomicInteger", "AtomicIntegerArray", "AtomicLong",
            "AtomicLongArray", "AtomicReference", "AtomicReferenceArray",
            "DoubleAdder", "LongAdder",
        }
    ),
    "java.util.concurrent.locks": frozenset(
        {
            "Condition", "Lock", "LockSupport", "ReadWriteLock", "ReentrantLock",
            "ReentrantReadWriteLock", "StampedLock",
        }
    ),
    "java.util.regex": frozenset({"MatchResult", "Matcher", "Pattern", "PatternSyntaxException"}),
    "java.util.stream": frozenset(
        {
            "BaseStream", "Collector", "Collectors", "DoubleStream", "IntStream",
            "LongStream", "Stream", "StreamSupport",
        }
    ),
    "java.util.logging": frozenset(
        {"ConsoleHandler", "FileHandler", "Formatter", "Handler", "Level", "LogManager", "LogRecord", "Logger"}
    ),
    "java.io": frozenset(
        {
            "BufferedInputStream", "BufferedOutputStream", "BufferedReader",
            "BufferedWriter", "ByteArrayInputStream", "ByteArrayOutputStream",
            "Closeable", "DataInput", "DataInputStream", "DataOutput",
            "DataOutputStream", "EOFException", "Externalizable", "File",
            "FileFilter", "FileInputStream", "FileNotFoundException",
            "FileOutputStream", "FileReader", "FileWriter", "FilenameFilter",
            "Flushable", "IOException", "InputStream", "InputStreamReader",
            "InterruptedIOException", "ObjectInputStream", "ObjectOutputStream",
            "OutputStream", "OutputStreamWriter", "PrintStream", "PrintWriter",
            "PushbackReader", "RandomAccessFile", "Reader", "Serializable",
            "StringReader", "StringWriter", "UncheckedIOException",
            "UnsupportedEncodingException", "Writer",
        }
    ),
    "java.nio": frozenset(
        {"Buffer", "ByteBuffer", "ByteOrder", "CharBuffer", "DoubleBuffer", "FloatBuffer", "IntBuffer", "LongBuffer"}
    ),
    "java.nio.charset": frozenset({"Charset", "StandardCharsets", "UnsupportedCharsetException"}),
    "java.nio.file": frozenset(
        {
            "DirectoryStream", "FileAlreadyExistsException", "FileSystem",
            "FileSystems", "FileVisitResult", "Files", "InvalidPathException",
            "LinkOption", "NoSuchFileException", "OpenOption", "Path", "PathMatcher",
            "Paths", "SimpleFileVisitor", "StandardCopyOption", "StandardOpenOption",
            "WatchService",
        }
    ),
    "java.net": frozenset(
        {
            "HttpURLConnection", "InetAddress", "InetSocketAddress",
            "MalformedURLException", "ServerSocket", "Socket", "SocketException",
            "SocketTimeoutException", "URI", "URISyntaxException", "URL",
            "URLConnection", "URLDecoder", "URLEncoder", "UnknownHostException",
        }
    ),
    "java.math": frozenset({"BigDecimal", "BigInteger", "MathContext", "RoundingMode"}),
    "java.text": frozenset(
        {
            "DateFormat", "DecimalFormat", "Format", "MessageFormat", "NumberFormat",
            "ParseException", "SimpleDateFormat",
        }
    ),
    "java.time": frozenset(
        {
            "Clock", "DateTimeException", "DayOfWeek", "Duration", "Instant",
            "LocalDate", "LocalDateTime", "LocalTime", "Month", "OffsetDateTime",
            "Period", "Year", "YearMonth", "ZoneId", "ZoneOffset", "ZonedDateTime",
        }
    ),
    "java.time.format": frozenset({"DateTimeFormatter", "DateTimeParseException", "FormatStyle"}),
    "java.time.temporal": frozenset({"ChronoField", "ChronoUnit", "Temporal", "TemporalUnit"}),
    "java.sql": frozenset(
        {
            "Connection", "Date", "DriverManager", "PreparedStatement", "ResultSet",
            "SQLException", "Statement", "Time", "Timestamp", "Types",
        }
    ),
}


def binary_names() -> Iterator[str]:
    """Yield every indexed class as a binary name (java.util.Map$Entry)"""
    for package_name, class_names in JDK_CLASSES.items():
        for class_name in class_names:
            yield f"{package_name}.{class_name}"
